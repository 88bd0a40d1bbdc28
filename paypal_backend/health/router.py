from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from paypal_backend.utils.rate_limit import rate_limit_health_info

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
def health_root(request: Request):
    settings = request.app.state.settings
    return {"ok": True, "env": settings.env, "configured": settings.has_credentials}


@router.get("/rate-limit")
def health_rate_limit(request: Request):
    return JSONResponse(rate_limit_health_info(request))
