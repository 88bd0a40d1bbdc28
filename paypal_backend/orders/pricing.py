"""
Tarification pure (pas de PayPal, pas de réseau).
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Dict, Union

from paypal_backend.config import CURRENCY
from .errors import InvalidAmount, InvalidPackage

# module paypal_backend.orders.pricing
# Paquets: 1 vie = 10€, 3 vies = 20€, 5 vies = 30€
PACKAGE_PRICES: Dict[str, Decimal] = {
    "1": Decimal("10"),
    "3": Decimal("20"),
    "5": Decimal("30"),
}
PACKAGE_PREFIX = "pack_"
INVALID_PACKAGE_MESSAGE = "Pacchetto non valido. Usa 1, 3 oppure 5."

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class PriceQuote:
    tier: str
    amount: Decimal
    currency: str = CURRENCY


def package_tier(package_id: str) -> str:
    """
    Ramène un identifiant de paquet à son palier ("pack_3" -> "3").
    - Comparaison sensible à la casse après trim ("PACK_3" est refusé).
    - Soulève InvalidPackage si l'identifiant est vide ou inconnu.
    """
    p = str(package_id or "").strip()
    tier = p[len(PACKAGE_PREFIX):] if p.startswith(PACKAGE_PREFIX) else p
    if tier not in PACKAGE_PRICES:
        raise InvalidPackage(INVALID_PACKAGE_MESSAGE)
    return tier


def resolve_price(package_id: str) -> PriceQuote:
    """Accepte "1"|"3"|"5" ou "pack_1"|"pack_3"|"pack_5"."""
    tier = package_tier(package_id)
    return PriceQuote(tier=tier, amount=PACKAGE_PRICES[tier])


def format_money(value: Union[Decimal, float, int, str]) -> str:
    """
    Chaîne à virgule fixe attendue par PayPal (exactement 2 décimales).
    - Arrondi au centime supérieur à partir de la demi (ROUND_HALF_UP).
    - Soulève InvalidAmount pour NaN, ±Infinity ou une valeur non numérique.
    """
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
        if not amount.is_finite():
            raise InvalidAmount("Importo non valido")
        # Précision suffisante pour tous les chiffres entiers plus les centimes
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, amount.adjusted() + 3)
            return str(amount.quantize(_CENTS, rounding=ROUND_HALF_UP))
    except (InvalidOperation, ValueError):
        raise InvalidAmount("Importo non valido")
