from pydantic import BaseModel
from typing import Any, Literal, Optional

class ChatRequest(BaseModel):
    # untyped so a missing, falsy or non-string message is a 400 from the handler, not a 422
    message: Any = None

class ChatResponse(BaseModel):
    response: str

class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None

class PingResponse(BaseModel):
    message: str

class HealthResponse(BaseModel):
    status: str = "ok"
    time: str
    apiKey: Literal["configured", "missing"]
