"""
Garde d'origine (CORS) sans dépendance HTTP: décide des en-têtes à poser.
Le middleware app_setup/cors.py applique ces décisions aux requêtes.
"""
from typing import Dict, Optional

from paypal_backend.config import Settings

PREFLIGHT_METHOD = "OPTIONS"

ALLOW_METHODS = "POST, OPTIONS"
ALLOW_HEADERS = "Content-Type, Authorization"
MAX_AGE = "86400"


def is_allowed_origin(value: Optional[str], settings: Settings) -> bool:
    """Origine dans la liste blanche, ou se terminant par le suffixe de confiance (.github.io)."""
    v = str(value or "").strip()
    if not v:
        return False
    if v in settings.allowed_origins:
        return True
    return bool(settings.trusted_suffix) and v.endswith(settings.trusted_suffix)


def cors_headers(origin: Optional[str], settings: Settings) -> Dict[str, str]:
    """
    En-têtes CORS pour une requête.
    - Origine autorisée: Access-Control-Allow-Origin reflété + Vary: Origin.
    - Sinon: joker "*" (mode dégradé, la requête n'est jamais bloquée).
    """
    headers: Dict[str, str] = {}
    if origin and is_allowed_origin(origin, settings):
        headers["Access-Control-Allow-Origin"] = origin
        headers["Vary"] = "Origin"
    else:
        headers["Access-Control-Allow-Origin"] = "*"
    headers["Access-Control-Allow-Methods"] = ALLOW_METHODS
    headers["Access-Control-Allow-Headers"] = ALLOW_HEADERS
    headers["Access-Control-Max-Age"] = MAX_AGE
    return headers


def is_preflight(method: str) -> bool:
    return (method or "").upper() == PREFLIGHT_METHOD
