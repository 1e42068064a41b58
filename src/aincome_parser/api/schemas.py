import datetime as dt

from pydantic import BaseModel, Field

from aincome_parser.domain.results import AutoApplyReason
from aincome_parser.models import Category
from aincome_parser.services.chat import ChatTurn


class IntentRequest(BaseModel):
    message: str


class ParseRequest(BaseModel):
    message: str
    categories: list[Category] | None = None
    user_id: str | None = None
    now: dt.date | None = None
    use_ai: bool = True


class ParseResponse(BaseModel):
    transactions: list[dict[str, object]]
    count: int
    source: str | None = None
    # One entry per transaction: None when it may be applied without confirmation.
    auto_apply: list[AutoApplyReason | None] = Field(default_factory=list)


class ChatRequest(BaseModel):
    message: str
    categories: list[Category] | None = None
    history: list[ChatTurn] = Field(default_factory=list)
    user_id: str | None = None
