"""
Factory d’application recommandée pour les entrypoints (ex: paypal_backend.asgi).
Ordonne les étapes d’initialisation de manière lisible et testable.
"""
from typing import Optional
from fastapi import FastAPI
from paypal_backend.config import Settings, load_settings
from .lifespan import lifespan
from .security import register_security_middleware
from .cors import register_cors_middleware
from .exceptions import register_exception_handlers
from .routes import register_routes
from .routers import register_routers


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Construit l’app FastAPI avec le lifespan et enregistre:
      - la configuration (app.state.settings), construite une seule fois
      - en-têtes de sécurité, puis garde d'origine CORS (ajoutée en dernier pour s'exécuter en premier)
      - gestionnaires d’exceptions, routes simples et routers
    Retour:
      FastAPI prêt à être utilisé par le serveur ASGI.
    """
    app = FastAPI(title="PayPal Orders API", lifespan=lifespan)
    app.state.settings = settings or load_settings()
    register_security_middleware(app)
    register_cors_middleware(app)
    register_exception_handlers(app)
    register_routes(app)
    register_routers(app)
    return app
