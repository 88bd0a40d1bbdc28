"""
Erreurs métier de la feature 'orders'.
Chaque erreur connaît son code HTTP et sait produire l'enveloppe JSON {"error": ...}
renvoyée au client (voir app_setup/exceptions.py).
"""
from typing import Any, Dict, List, Optional


class PaymentError(Exception):
    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message}


class ValidationError(PaymentError):
    """Entrée client absente ou malformée (400)."""
    status_code = 400


class InvalidPackage(ValidationError):
    pass


class InvalidAmount(PaymentError):
    """Montant non fini: défaut de tarification côté serveur."""
    status_code = 500


class ConfigurationError(PaymentError):
    """Secrets PayPal absents: distinct d'une erreur client, inutile de réessayer."""
    status_code = 500


class UpstreamError(PaymentError):
    status_code = 500


class UpstreamAuthError(UpstreamError):
    pass


class UpstreamOrderError(UpstreamError):
    pass


class UpstreamCaptureError(UpstreamError):
    """
    Échec de la capture côté PayPal.
    - status: code HTTP renvoyé par PayPal (None si erreur de transport)
    - details: tableau d'erreurs structurées PayPal, s'il existe
    - debug_id: identifiant PayPal pour le support
    """

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        details: Optional[List[Dict[str, Any]]] = None,
        debug_id: Optional[str] = None,
    ):
        super().__init__(message)
        self.status = status
        self.details = details
        self.debug_id = debug_id

    def to_payload(self) -> Dict[str, Any]:
        return {
            "error": self.message,
            "paypal": {"status": self.status, "details": self.details, "debugId": self.debug_id},
        }


class SettlementIncomplete(PaymentError):
    """Capture acceptée par l'API mais statut non COMPLETED: paiement non définitif."""
    status_code = 400

    def __init__(self, status: str, capture: Dict[str, Any]):
        super().__init__(f"Pagamento non completato ({status})")
        self.status = status
        self.capture = capture

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message, "capture": self.capture}
