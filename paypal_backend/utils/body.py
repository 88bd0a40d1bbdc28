# module paypal_backend.utils.body
import json
from typing import Any, Dict


def safe_json_parse(body: Any) -> Dict[str, Any]:
    """
    Parse défensif du corps de requête.
    - dict déjà parsé: renvoyé tel quel
    - bytes/str JSON: décodé; JSON invalide ou non-objet -> {}
    - ne lève jamais d'exception
    """
    if isinstance(body, dict):
        return body
    if isinstance(body, (bytes, bytearray)):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return {}
    if not isinstance(body, str) or not body.strip():
        return {}
    try:
        data = json.loads(body)
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
