from datetime import datetime, timezone

from fastapi import APIRouter
from enhancer.routes.schemas.health import HealthCheckResponse, ServiceInfoResponse
from enhancer.utils.core import API_TITLE, API_VERSION

router = APIRouter()


@router.get("/", response_model=ServiceInfoResponse)
async def root():
    """ルートエンドポイント - サービス情報"""
    return ServiceInfoResponse(
        message=API_TITLE,
        version=API_VERSION,
        endpoints={
            "enhance": "POST /api/enhance",
            "health": "GET /health",
        },
    )


@router.get("/health", response_model=HealthCheckResponse)
async def health_check():
    """ヘルスチェックエンドポイント"""
    return HealthCheckResponse(
        status="ok", timestamp=datetime.now(timezone.utc).isoformat()
    )
