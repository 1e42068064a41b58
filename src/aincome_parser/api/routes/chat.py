from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from aincome_parser import replies
from aincome_parser.api.dependencies import get_assistant
from aincome_parser.api.schemas import ChatRequest
from aincome_parser.domain.defaults import default_categories
from aincome_parser.extraction.categories import DuplicateCategoryIdError
from aincome_parser.services.chat import ChatAssistant, ChatReply

router = APIRouter(prefix="/api/chat")


@router.post("", response_model=ChatReply)
async def chat(
    req: ChatRequest,
    assistant: Annotated[ChatAssistant, Depends(get_assistant)],
) -> ChatReply:
    categories = req.categories if req.categories is not None else default_categories()
    try:
        return await assistant.handle_message(
            req.message,
            categories,
            history=req.history,
            user_id=req.user_id,
        )
    except DuplicateCategoryIdError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.get("/welcome")
async def welcome() -> dict[str, str]:
    return {"reply": replies.WELCOME}
