from fastapi import APIRouter
from taskq.settings import settings

router = APIRouter()

@router.get("/health")
def health():
    return {"status": "ok"}

@router.get("/v1/health")
def health_v1():
    return {
        "ok": True,
        "app": settings.app_name,
        "version": settings.version,
    }
