"""Server Info — root endpoint identifying the service and its region.

Invariants:
    - GET / always returns 200, never touches the database
"""

from fastapi import APIRouter, Depends

from app.config import Settings, get_settings
from app.core.clock import utc_timestamp
from app.schemas.probes import ServerInfo

router = APIRouter(tags=["info"])

SERVER_MESSAGE = "Railway-Supabase Latency Test Server"


@router.get("/", response_model=ServerInfo)
async def server_info(settings: Settings = Depends(get_settings)):
    """Static info: message, current timestamp, region label."""
    return ServerInfo(
        message=SERVER_MESSAGE,
        timestamp=utc_timestamp(),
        region=settings.railway_region,
    )
