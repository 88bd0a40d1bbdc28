"""
Registre central des routers.
- Paiements: paypalCreateOrder, paypalCaptureOrder (chemins appelés tels quels par le storefront)
- Health: /health, /health/rate-limit
"""
from fastapi import FastAPI
from paypal_backend.orders import views as orders_views
from paypal_backend.health.router import router as health_router


def register_routers(app: FastAPI) -> None:
    app.include_router(orders_views.router)
    app.include_router(health_router)
