"""
Middleware CORS piloté par la garde d'origine (paypal_backend.orders.origin).
- OPTIONS (preflight): réponse 204 sans corps + en-têtes CORS, la requête est « traitée ».
- Autres méthodes: la requête continue, les en-têtes CORS sont posés sur la réponse.
"""
from fastapi import FastAPI, Request
from fastapi.responses import Response
from starlette.status import HTTP_204_NO_CONTENT

from paypal_backend.orders.origin import cors_headers, is_preflight


def register_cors_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def origin_guard(request: Request, call_next):
        headers = cors_headers(request.headers.get("origin"), request.app.state.settings)
        if is_preflight(request.method):
            return Response(status_code=HTTP_204_NO_CONTENT, headers=headers)
        response = await call_next(request)
        for name, value in headers.items():
            if name == "Vary":
                vary = [v.strip() for v in response.headers.get("Vary", "").split(",") if v.strip()]
                if value not in vary:
                    vary.append(value)
                value = ", ".join(vary)
            response.headers[name] = value
        return response
