from fastapi import FastAPI

# Réponses de paiement: jamais mises en cache (navigateur ou proxy)
NO_STORE_PATHS = ("/paypalCreateOrder", "/paypalCaptureOrder")


def register_security_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def security_headers(request, call_next):
        response = await call_next(request)

        # En-têtes de sécurité (API JSON uniquement, pas de CSP nécessaire)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer")

        if request.url.path.rstrip("/") in NO_STORE_PATHS:
            response.headers["Cache-Control"] = "no-store"
            response.headers["Pragma"] = "no-cache"

        return response
