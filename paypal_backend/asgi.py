"""
ASGI entrypoint: expose `app` for process managers / deployments.

- En production, un process manager (ex: gunicorn/uvicorn-workers) importe `paypal_backend.asgi:app`
  pour servir l’application FastAPI en mode ASGI.
- Toute la configuration (routes, middlewares, CORS, settings) est centralisée
  dans paypal_backend.app_setup.factory, ce fichier ne fait qu’exposer l’instance `app`.
- Lancement local: `python -m paypal_backend` (voir __main__.py).
"""

from paypal_backend.app import app
