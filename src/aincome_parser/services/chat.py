import asyncio
import datetime as dt
from collections.abc import Sequence
from typing import Literal

from openai import OpenAI, OpenAIError
from pydantic import BaseModel

from aincome_parser import replies
from aincome_parser.core import settings
from aincome_parser.domain.results import as_list
from aincome_parser.integration.llm import build_client, default_model, extract_output_text, llm_configured
from aincome_parser.intent import IntentClassifier
from aincome_parser.logger import get_logger
from aincome_parser.manager import ParserService
from aincome_parser.models import Category, ChatIntent, ParsedTransaction

logger = get_logger(__name__)

ASSISTANT_CONTEXT = """Bạn là trợ lý tài chính thông minh tên "AIncome Assistant". Bạn giúp người dùng quản lý chi tiêu, thu nhập và tài chính cá nhân.

Ngữ cảnh ứng dụng:
- Tên app: AIncome - Personal Finance Tracker
- Tính năng chính: Theo dõi thu chi, quản lý ngân sách, đặt mục tiêu tiết kiệm, phân tích báo cáo
- Người dùng có thể trò chuyện với bạn để thêm giao dịch hoặc hỏi về tài chính nói chung

Tính cách của bạn:
- Thân thiện, nhiệt tình, hữu ích
- Trả lời ngắn gọn bằng tiếng Việt
- Khi người dùng muốn thêm giao dịch, gợi ý họ nói rõ số tiền và nội dung, ví dụ "Ăn phở 50k"."""


class ChatTurn(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatReply(BaseModel):
    intent: ChatIntent
    confidence: float
    reply: str
    transactions: list[ParsedTransaction] = []
    source: str | None = None


class ChatResponder:
    """Conversational replies for small talk and unclear messages."""

    def __init__(self, client: OpenAI | None = None, model: str | None = None, history_limit: int | None = None):
        self.client = client
        self.model = model or default_model()
        if history_limit is None:
            history_limit = settings.get_env_int("CHAT_HISTORY_LIMIT", settings.DEFAULT_HISTORY_LIMIT, min_value=0)
        self.history_limit = history_limit

    @classmethod
    def from_environment(cls) -> "ChatResponder":
        if llm_configured():
            return cls(client=build_client())
        return cls()

    def build_input(self, message: str, history: Sequence[ChatTurn]) -> str:
        lines = []
        recent = list(history)[-self.history_limit:] if self.history_limit else []
        for turn in recent:
            speaker = "Người dùng" if turn.role == "user" else "Trợ lý"
            lines.append(f"{speaker}: {turn.content}")
        lines.append(f"Người dùng: {message}")
        lines.append("Trợ lý:")
        return "\n".join(lines)

    def reply(self, message: str, history: Sequence[ChatTurn] = ()) -> str | None:
        if self.client is None:
            return None
        try:
            response = self.client.responses.create(
                model=self.model,
                instructions=ASSISTANT_CONTEXT,
                input=self.build_input(message, history),
                temperature=0.7,
            )
        except OpenAIError as e:
            logger.error(f"[CHAT] Reply request failed: {e}")
            return None
        text = extract_output_text(response)
        return text.strip() if text else None


class ChatAssistant:
    """
    Routes chat messages: transactions go to the parser chain, everything else
    gets a conversational reply (model-generated when available, canned otherwise).
    """

    def __init__(
        self,
        service: ParserService,
        responder: ChatResponder | None = None,
        classifier: IntentClassifier | None = None,
    ):
        self.service = service
        self.responder = responder or ChatResponder()
        self.classifier = classifier or IntentClassifier()

    async def _converse(self, message: str, history: Sequence[ChatTurn], canned: str) -> str:
        text = await asyncio.to_thread(self.responder.reply, message, history)
        return text or canned

    async def handle_message(
        self,
        message: str,
        categories: Sequence[Category],
        *,
        history: Sequence[ChatTurn] = (),
        user_id: str | None = None,
        now: dt.datetime | dt.date | None = None,
    ) -> ChatReply:
        intent = self.classifier.classify(message)
        logger.info(f"[CHAT] Intent {intent.intent.value} (confidence: {intent.confidence:.2f})")

        if intent.intent == ChatIntent.SMALL_TALK:
            fallback_text = replies.small_talk_reply(message)
            text = await self._converse(message, history, fallback_text)
            return ChatReply(intent=intent.intent, confidence=intent.confidence, reply=text)

        if intent.intent == ChatIntent.CREATE_TRANSACTION:
            result = await asyncio.to_thread(
                self.service.parse,
                message,
                categories,
                user_id=user_id,
                now=now,
            )
            transactions = as_list(result)
            if not transactions:
                return ChatReply(intent=intent.intent, confidence=intent.confidence, reply=replies.PARSE_FAILED)
            return ChatReply(
                intent=intent.intent,
                confidence=intent.confidence,
                reply=replies.confirmation_message(len(transactions)),
                transactions=transactions,
                source=transactions[0].source,
            )

        text = await self._converse(message, history, replies.UNKNOWN_INTENT)
        return ChatReply(intent=intent.intent, confidence=intent.confidence, reply=text)
