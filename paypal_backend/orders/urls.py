"""
Construction des URLs: base API PayPal, retour/annulation et redirection d'approbation.
"""
from typing import NamedTuple, Optional
from urllib.parse import quote

from paypal_backend.config import LIVE, Settings
from .origin import is_allowed_origin

# module paypal_backend.orders.urls
API_BASE_LIVE = "https://api-m.paypal.com"
API_BASE_SANDBOX = "https://api-m.sandbox.paypal.com"
WEB_BASE_LIVE = "https://www.paypal.com"
WEB_BASE_SANDBOX = "https://www.sandbox.paypal.com"


class RedirectUrls(NamedTuple):
    return_url: str
    cancel_url: str


def api_base(env: str) -> str:
    return API_BASE_LIVE if env == LIVE else API_BASE_SANDBOX


def choose_site_base(candidate: Optional[str], origin: Optional[str], settings: Settings) -> str:
    """
    Priorité:
      1) siteBase explicite du client, s'il passe la garde d'origine
      2) en-tête Origin de la requête, s'il passe la garde d'origine
      3) site par défaut configuré
    """
    candidate = str(candidate or "").strip()
    origin = str(origin or "").strip()
    if candidate and is_allowed_origin(candidate, settings):
        return candidate
    if origin and is_allowed_origin(origin, settings):
        return origin
    return settings.default_site_base


def build_return_cancel_urls(site_base: Optional[str], default_base: str, page: str = "area.html") -> RedirectUrls:
    """
    URLs de retour PayPal: toujours la même page d'atterrissage, distinguée par ?paypal=success|cancel.
    Les "/" finaux sont retirés; une base vide est remplacée par default_base.
    """
    base = str(site_base or "").strip().rstrip("/") or default_base.rstrip("/")
    return RedirectUrls(
        return_url=f"{base}/{page}?paypal=success&src=paypal",
        cancel_url=f"{base}/{page}?paypal=cancel&src=paypal",
    )


def checkout_now_url(env: str, order_id: Optional[str]) -> Optional[str]:
    # Format propre à chaque environnement, à revalider contre la doc PayPal
    token = quote(str(order_id or "").strip(), safe="")
    if not token:
        return None
    host = WEB_BASE_LIVE if env == LIVE else WEB_BASE_SANDBOX
    return f"{host}/checkoutnow?token={token}"
