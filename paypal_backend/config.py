# paypal_backend.config
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple
import logging
import os
from dotenv import load_dotenv

# Calculer le chemin du projet puis charger .env de manière explicite
BASE_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = BASE_DIR / ".env"
load_dotenv(dotenv_path=ENV_PATH, override=True)

"""
Configuration centrale du backend PayPal.

- Charge le fichier .env à la racine du projet (BASE_DIR/.env)
- Normalise les secrets PayPal (env, client id, secret) sans jamais les journaliser
- Expose les origines CORS autorisées et le site public utilisé pour les URLs de retour
- Construit une seule fois un objet Settings immuable (load_settings) partagé par les handlers
"""

logger = logging.getLogger(__name__)

SANDBOX = "sandbox"
LIVE = "live"

CURRENCY = "EUR"

# Origines du storefront (GitHub Pages + serveurs de dev locaux)
DEFAULT_ALLOWED_ORIGINS = (
    "https://marioianniello.github.io",
    "http://localhost:5500",
    "http://127.0.0.1:5500",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)
DEFAULT_TRUSTED_SUFFIX = ".github.io"

# Site public (GitHub Pages: URL complète du site du dépôt)
DEFAULT_SITE_BASE = "https://marioianniello.github.io/survivortrain-site"
DEFAULT_RETURN_PAGE = "area.html"
DEFAULT_DESCRIPTION_PREFIX = "Skillboll Survivor Train"


def _clean_env(v: Optional[str]) -> str:
    """
    Nettoie une valeur d'environnement:
    - supprime les espaces et guillemets (simples, doubles) et backticks
    - retourne toujours une chaîne (jamais None)
    """
    return (v or "").strip().strip("'").strip('"').strip("`")


def _split_csv(v: str) -> Tuple[str, ...]:
    return tuple(o.strip().rstrip("/") for o in v.split(",") if o.strip())


def normalize_env(value: Optional[str]) -> str:
    """'live' (insensible à la casse) sélectionne la production, tout le reste le sandbox."""
    env = _clean_env(value).lower() or SANDBOX
    if env not in (SANDBOX, LIVE):
        logger.warning("PAYPAL_ENV inconnu (%s), utilisation du sandbox", env)
        return SANDBOX
    return env


@dataclass(frozen=True)
class Settings:
    """Configuration process-wide, lue une fois au démarrage puis en lecture seule."""

    env: str = SANDBOX
    client_id: str = ""
    secret: str = ""
    allowed_origins: Tuple[str, ...] = DEFAULT_ALLOWED_ORIGINS
    trusted_suffix: str = DEFAULT_TRUSTED_SUFFIX
    default_site_base: str = DEFAULT_SITE_BASE
    return_page: str = DEFAULT_RETURN_PAGE
    description_prefix: str = DEFAULT_DESCRIPTION_PREFIX
    order_rate_limit: int = 20

    @property
    def has_credentials(self) -> bool:
        return bool(self.client_id and self.secret)

    def __repr__(self) -> str:
        # Les secrets ne doivent jamais apparaître dans les logs
        masked_id = "***" if self.client_id else ""
        masked_secret = "***" if self.secret else ""
        return (
            f"Settings(env={self.env!r}, client_id={masked_id!r}, "
            f"secret={masked_secret!r}, allowed_origins={self.allowed_origins!r})"
        )


def load_settings() -> Settings:
    """
    Construit Settings depuis l'environnement (après chargement du .env).
    - PAYPAL_ENV: "sandbox" | "live" (défaut sandbox)
    - PAYPAL_CLIENT_ID / PAYPAL_SECRET: identifiants REST PayPal
    - CORS_ALLOWED_ORIGINS: liste séparée par des virgules
    """
    origins = _split_csv(os.getenv("CORS_ALLOWED_ORIGINS") or "") or DEFAULT_ALLOWED_ORIGINS
    try:
        rate_limit = int(os.getenv("ORDER_RATE_LIMIT", "20"))
    except ValueError:
        rate_limit = 20
    return Settings(
        env=normalize_env(os.getenv("PAYPAL_ENV")),
        client_id=_clean_env(os.getenv("PAYPAL_CLIENT_ID")),
        secret=_clean_env(os.getenv("PAYPAL_SECRET")),
        allowed_origins=origins,
        trusted_suffix=_clean_env(os.getenv("CORS_TRUSTED_SUFFIX")) or DEFAULT_TRUSTED_SUFFIX,
        default_site_base=(_clean_env(os.getenv("DEFAULT_SITE_BASE")) or DEFAULT_SITE_BASE).rstrip("/"),
        return_page=_clean_env(os.getenv("RETURN_PAGE")) or DEFAULT_RETURN_PAGE,
        description_prefix=_clean_env(os.getenv("ORDER_DESCRIPTION_PREFIX")) or DEFAULT_DESCRIPTION_PREFIX,
        order_rate_limit=rate_limit,
    )
