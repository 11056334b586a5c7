# File: getlocalbuddy/api/routes_status.py

from fastapi import APIRouter

from getlocalbuddy.core.config import settings

router = APIRouter()


@router.get("/status", summary="Liveness probe")
def status():
    """
    Always ok. Must not depend on get_db so the platform sees the process
    as alive even while the database is unreachable.
    """
    return {"status": "ok", "service": settings.service_name}
