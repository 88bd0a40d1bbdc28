"""
Cas d'usage 'orders': orchestre validation, tarification, URLs et client PayPal.
Flux linéaire par requête, sans état partagé: jeton puis création (ou capture).
"""
import logging
from typing import Any, Dict, List, Optional

from paypal_backend.config import Settings
from . import pricing
from . import urls
from .errors import ConfigurationError, SettlementIncomplete, ValidationError
from .paypal_client import PayPalClient

logger = logging.getLogger(__name__)

TEAM_NAME_MAX_LENGTH = 40
COMPLETED = "COMPLETED"


def _field(body: Dict[str, Any], name: str) -> str:
    return str(body.get(name) or "").strip()


def require_configuration(settings: Settings) -> None:
    if not settings.has_credentials:
        logger.error("PayPal configuration missing env=%s", settings.env)
        raise ConfigurationError("Config PayPal mancante")


def validate_create_request(body: Dict[str, Any]) -> Dict[str, str]:
    """
    Valide {teamName, packageId}; la première erreur l'emporte.
    - teamName: obligatoire, 40 caractères max (après trim)
    - packageId: obligatoire
    """
    team_name = _field(body, "teamName")
    package_id = _field(body, "packageId")
    if not team_name:
        raise ValidationError("teamName obbligatorio")
    if len(team_name) > TEAM_NAME_MAX_LENGTH:
        raise ValidationError(f"teamName troppo lungo (max {TEAM_NAME_MAX_LENGTH} caratteri)")
    if not package_id:
        raise ValidationError("packageId obbligatorio (1, 3 oppure 5)")
    return {"team_name": team_name, "package_id": package_id}


def order_description(settings: Settings, tier: str, team_name: str) -> str:
    return f"{settings.description_prefix} – Pacchetto {tier} vite – {team_name}"


def usable_links(links: Any) -> List[Dict[str, str]]:
    """Ne garde que les liens {rel, href} complets renvoyés par PayPal."""
    if not isinstance(links, list):
        return []
    return [
        {"rel": link["rel"], "href": link["href"]}
        for link in links
        if isinstance(link, dict) and link.get("rel") and link.get("href")
    ]


def approve_url(env: str, order_id: str, links: List[Dict[str, str]]) -> Optional[str]:
    for link in links:
        if link["rel"] == "approve":
            return link["href"]
    return urls.checkout_now_url(env, order_id)


async def create_order(
    body: Dict[str, Any],
    *,
    origin: Optional[str],
    settings: Settings,
    client: PayPalClient,
) -> Dict[str, Any]:
    """
    Crée un ordre PayPal pour un paquet.
    Retour: {orderID, approveUrl, env, links} pour rediriger le joueur vers PayPal.
    """
    req = validate_create_request(body)
    quote = pricing.resolve_price(req["package_id"])
    amount = pricing.format_money(quote.amount)

    site_base = urls.choose_site_base(body.get("siteBase"), origin, settings)
    redirect_urls = urls.build_return_cancel_urls(site_base, settings.default_site_base, settings.return_page)

    require_configuration(settings)

    access_token = await client.get_access_token()
    order = await client.create_order(
        access_token,
        amount,
        order_description(settings, quote.tier, req["team_name"]),
        redirect_urls,
    )
    links = usable_links(order.links)
    logger.info("orders.create order_id=%s env=%s package=%s amount=%s", order.id, settings.env, quote.tier, amount)
    return {
        "orderID": order.id,
        "approveUrl": approve_url(settings.env, order.id, links),
        "env": settings.env,
        "links": links,
    }


async def capture_order(
    body: Dict[str, Any],
    *,
    settings: Settings,
    client: PayPalClient,
) -> Dict[str, Any]:
    """
    Capture un ordre approuvé puis vérifie le statut de règlement.
    Statut différent de COMPLETED (toutes casses): SettlementIncomplete (400) avec le payload brut.
    """
    order_id = _field(body, "orderID")
    if not order_id:
        raise ValidationError("orderID obbligatorio")

    require_configuration(settings)

    access_token = await client.get_access_token()
    capture = await client.capture_order(access_token, order_id)

    status = capture.status.upper()
    # Statut absent ou vide: traité comme non réglé (400 UNKNOWN), pas comme un succès
    if status != COMPLETED:
        logger.warning("orders.capture incomplete order_id=%s status=%s", order_id, status or "<vide>")
        raise SettlementIncomplete(status or "UNKNOWN", capture.raw)
    logger.info("orders.capture completed order_id=%s env=%s", order_id, settings.env)
    return {"capture": capture.raw}
