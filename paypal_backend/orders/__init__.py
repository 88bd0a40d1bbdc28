"""
Module 'orders' (feature-first): point d'entrée public.
Réunit tarification, garde d'origine, URLs, client PayPal et cas d'usage.
"""

from .errors import (
    PaymentError,
    ValidationError,
    InvalidPackage,
    InvalidAmount,
    ConfigurationError,
    UpstreamError,
    UpstreamAuthError,
    UpstreamOrderError,
    UpstreamCaptureError,
    SettlementIncomplete,
)
from .pricing import PriceQuote, resolve_price, package_tier, format_money
from .origin import is_allowed_origin, cors_headers
from .urls import RedirectUrls, api_base, choose_site_base, build_return_cancel_urls, checkout_now_url
from .paypal_client import PayPalClient, RemoteOrder, CaptureResult
from .service import create_order, capture_order

__all__ = [
    # errors
    "PaymentError",
    "ValidationError",
    "InvalidPackage",
    "InvalidAmount",
    "ConfigurationError",
    "UpstreamError",
    "UpstreamAuthError",
    "UpstreamOrderError",
    "UpstreamCaptureError",
    "SettlementIncomplete",
    # pricing
    "PriceQuote",
    "resolve_price",
    "package_tier",
    "format_money",
    # origin
    "is_allowed_origin",
    "cors_headers",
    # urls
    "RedirectUrls",
    "api_base",
    "choose_site_base",
    "build_return_cancel_urls",
    "checkout_now_url",
    # paypal
    "PayPalClient",
    "RemoteOrder",
    "CaptureResult",
    # services
    "create_order",
    "capture_order",
]
