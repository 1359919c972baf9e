import logging
from typing import Optional
from fastapi import APIRouter
from healthchat.schemas.chat import ChatRequest, ChatResponse, ErrorResponse
from healthchat.services.chat_service import generate_reply

router = APIRouter(prefix="/api", tags=["chat"])
logger = logging.getLogger(__name__)

@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat(req: Optional[ChatRequest] = None):
    # a request without a body counts as a missing message
    message = req.message if req is not None else None
    logger.info("chat request received: %s", message)
    reply = await generate_reply(message)
    return ChatResponse(response=reply)
