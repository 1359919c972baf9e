from datetime import datetime, timezone
from fastapi import APIRouter
from healthchat.core import config
from healthchat.schemas.chat import HealthResponse, PingResponse

router = APIRouter(prefix="/api", tags=["meta"])

def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

@router.get("/test", response_model=PingResponse)
def api_test():
    return PingResponse(message="API is working!")

@router.get("/health", response_model=HealthResponse)
def health():
    # reports presence of the key only, never its value
    return HealthResponse(
        time=_utc_now_iso(),
        apiKey="configured" if config.GOOGLE_GEMINI_API_KEY else "missing",
    )
