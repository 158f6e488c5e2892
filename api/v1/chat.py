from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from api.deps import get_dispatcher
from api.schemas.balance import ErrorResponse
from api.schemas.chat import ChatRequest, ChatResponse
from app.chat.dispatcher import Dispatcher

router = APIRouter(prefix="/chat", tags=["chat"])
logger = logging.getLogger(__name__)


@router.post(
    "",
    response_model=ChatResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
def chat(req: ChatRequest, dispatcher: Dispatcher = Depends(get_dispatcher)) -> ChatResponse:
    history = [(item.role, item.content) for item in req.history]
    result = dispatcher.dispatch(req.message, history)
    logger.info("chat dispatched route=%s response_len=%s", result.route.value, len(result.response))
    return ChatResponse(response=result.response, route=result.route.value)
