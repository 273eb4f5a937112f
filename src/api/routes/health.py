from datetime import datetime

from fastapi import APIRouter, status

router = APIRouter(tags=["Health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health():
    """Liveness check"""
    return {"status": "ok", "timestamp": datetime.utcnow().isoformat()}
