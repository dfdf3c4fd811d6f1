"""Health check API"""
from fastapi import APIRouter

from clusterlab import __version__
from clusterlab.core.config import get_settings

router = APIRouter()


@router.get("/health")
async def ping():
    """기본 Health check"""
    return {"ok": True}


@router.get("/healthz")
async def healthz():
    """
    헬스체크 및 설정 점검

    Returns:
        {
            "ok": true,
            "version": "...",
            "max_clusters": 10
        }
    """
    settings = get_settings()
    return {
        "ok": True,
        "version": __version__,
        "max_clusters": settings.max_clusters,
    }
