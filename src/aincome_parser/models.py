import datetime as dt
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

FALLBACK_CONFIDENCE_CEILING = 0.85
LLM_CONFIDENCE_CEILING = 0.98

NOTE_MAX_LENGTH = 100


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class ChatIntent(str, Enum):
    SMALL_TALK = "small_talk"
    CREATE_TRANSACTION = "create_transaction"
    UNKNOWN = "unknown"


class Category(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: TransactionType
    icon: str = ""


class ParsedTransaction(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: TransactionType
    amount: float = Field(gt=0, allow_inf_nan=False)
    category_id: str = "" # "" when no category could be resolved
    category_name: str = ""
    note: Optional[str] = Field(default=None, max_length=NOTE_MAX_LENGTH)
    date: dt.date
    confidence: float = Field(ge=0.0, le=1.0)
    source: str = "fallback" # "fallback", "llm"

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value):
        # Model output sometimes carries a full timestamp.
        if isinstance(value, dt.datetime):
            return value.date()
        if isinstance(value, str) and "T" in value:
            return value.split("T", 1)[0]
        return value


class IntentClassificationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    intent: ChatIntent
    confidence: float = Field(ge=0.0, le=1.0)


ParseResult = Union[ParsedTransaction, list[ParsedTransaction], None]
