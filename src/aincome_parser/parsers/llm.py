import datetime as dt
import json
from collections.abc import Sequence
from typing import Any

from openai import OpenAI, OpenAIError
from pydantic import ValidationError
from rapidfuzz import fuzz, process

from aincome_parser.domain.results import collapse
from aincome_parser.integration.llm import build_client, default_model, extract_output_text
from aincome_parser.logger import get_logger
from aincome_parser.models import (
    LLM_CONFIDENCE_CEILING,
    NOTE_MAX_LENGTH,
    Category,
    ParsedTransaction,
    ParseResult,
    TransactionType,
)

from .base import TransactionParser

logger = get_logger(__name__)

OTHER_CATEGORY_NAME = "Khác"
OTHER_CATEGORY_CONFIDENCE = 0.6
NAME_MATCH_THRESHOLD = 85.0

INSTRUCTIONS = "Bạn là một trợ lý tài chính thông minh. Chỉ trả về JSON hợp lệ."

PROMPT_TEMPLATE = """Nhiệm vụ của bạn là phân tích tin nhắn tiếng Việt về giao dịch tài chính và trích xuất thông tin theo định dạng JSON.
Một tin nhắn có thể chứa nhiều giao dịch (mỗi dòng hoặc cách nhau bằng dấu phẩy).

Danh sách các hạng mục có sẵn:
{category_list}

Với mỗi giao dịch, hãy trích xuất:
1. type: "income" (thu) hoặc "expense" (chi)
2. amount: số tiền (VND, chuyển về đơn vị đồng)
3. category_id: chọn từ cột "ID" trong danh sách trên (KHÔNG PHẢI tên hay icon)
4. category_name: tên hạng mục từ cột "Name"
5. note: ghi chú ngắn gọn về giao dịch
6. date: ngày giao dịch (định dạng YYYY-MM-DD)
7. confidence: độ tin cậy (0-1)

Quy tắc:
- Số tiền: 50k = 50,000 | 1tr = 1,000,000 | 1.5 triệu = 1,500,000
- Nếu không nói rõ ngày → dùng hôm nay ({today})
- Nếu không chắc hạng mục → chọn "Khác" với confidence thấp
- Ghi chú ngắn gọn, không quá {note_limit} ký tự

Tin nhắn cần phân tích: "{message}"

Trả về CHÍNH XÁC JSON với định dạng:
{{"transactions": [{{"type": "expense", "amount": 50000, "category_id": "...", "category_name": "Ăn uống", "note": "Ăn phở", "date": "{today}", "confidence": 0.95}}]}}"""


def _strip_code_fence(text: str) -> str:
    stripped = text.strip()
    if stripped.startswith("```"):
        stripped = stripped.split("\n", 1)[1] if "\n" in stripped else ""
        if stripped.rstrip().endswith("```"):
            stripped = stripped.rstrip()[:-3]
    return stripped.strip()


def _raw_items(payload: Any) -> list[dict[str, Any]]:
    if isinstance(payload, list):
        items = payload
    elif isinstance(payload, dict):
        if isinstance(payload.get("transactions"), list):
            items = payload["transactions"]
        elif isinstance(payload.get("transaction"), dict):
            items = [payload["transaction"]]
        else:
            items = [payload]
    else:
        return []
    return [item for item in items if isinstance(item, dict)]


class LLMTransactionParser(TransactionParser):
    """
    Model-based parser behind an OpenAI-compatible endpoint.

    Output is reconciled against the caller's categories before it is returned,
    and any transport or decoding failure yields ``None`` so that the caller
    can fall back to the rule-based parser.
    """

    name = "llm"

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        client: OpenAI | None = None,
    ):
        self.client = client or build_client(api_key=api_key, base_url=base_url)
        self.model = model or default_model()

    def build_prompt(self, message: str, categories: Sequence[Category], today: dt.date) -> str:
        category_list = "\n".join(
            f'- ID: "{cat.id}" | Name: {cat.name} | Type: '
            f'{"Thu" if cat.type == TransactionType.INCOME else "Chi"} | Icon: {cat.icon}'
            for cat in categories
        )
        return PROMPT_TEMPLATE.format(
            category_list=category_list,
            today=today.isoformat(),
            note_limit=NOTE_MAX_LENGTH,
            message=message.replace('"', "'"),
        )

    def parse(
        self,
        message: str,
        categories: Sequence[Category],
        *,
        user_id: str | None = None,
        now: dt.datetime | dt.date | None = None,
    ) -> ParseResult:
        if not message.strip() or not categories:
            return None
        if isinstance(now, dt.datetime):
            today = now.date()
        else:
            today = now or dt.date.today()

        try:
            response = self.client.responses.create(
                model=self.model,
                instructions=INSTRUCTIONS,
                input=self.build_prompt(message, categories, today),
                temperature=0.3,
            )
        except OpenAIError as e:
            logger.error(f"[LLM] Parse request failed for user {user_id or 'anonymous'}: {e}")
            return None

        text = extract_output_text(response)
        if not text:
            logger.warning(f"[LLM] Empty response from model {self.model}.")
            return None

        try:
            payload = json.loads(_strip_code_fence(text))
        except json.JSONDecodeError:
            logger.warning(f"[LLM] Invalid JSON from model {self.model}: {text[:200]}")
            return None

        transactions = []
        for item in _raw_items(payload):
            transaction = self._reconcile(item, categories, today)
            if transaction is not None:
                transactions.append(transaction)
        return collapse(transactions)

    def _reconcile(
        self, item: dict[str, Any], categories: Sequence[Category], today: dt.date
    ) -> ParsedTransaction | None:
        try:
            confidence = float(item.get("confidence", 0.5))
        except (TypeError, ValueError):
            confidence = 0.5
        note = item.get("note")
        data = {
            "type": item.get("type"),
            "amount": item.get("amount"),
            "category_id": str(item.get("category_id") or ""),
            "category_name": str(item.get("category_name") or ""),
            "note": str(note)[:NOTE_MAX_LENGTH] if note else None,
            "date": item.get("date") or today,
            "confidence": min(max(confidence, 0.0), LLM_CONFIDENCE_CEILING),
            "source": self.name,
        }

        by_id = {cat.id: cat for cat in categories}
        if data["category_id"] not in by_id:
            category = self._resolve_by_name(data["category_name"], data["type"], categories)
            if category is not None:
                data["category_id"] = category.id
                data["category_name"] = category.name
            else:
                other = next((cat for cat in categories if cat.name == OTHER_CATEGORY_NAME), None)
                if other is None:
                    logger.debug(f"[LLM] Dropping item with unknown category '{data['category_name']}'.")
                    return None
                data["category_id"] = other.id
                data["category_name"] = other.name
                data["confidence"] = min(data["confidence"], OTHER_CATEGORY_CONFIDENCE)
        else:
            data["category_name"] = by_id[data["category_id"]].name

        try:
            return ParsedTransaction(**data)
        except ValidationError as e:
            logger.debug(f"[LLM] Dropping invalid item {item}: {e}")
            return None

    @staticmethod
    def _resolve_by_name(name: str, type_value: Any, categories: Sequence[Category]) -> Category | None:
        if not name:
            return None
        candidates = [cat for cat in categories if cat.type.value == type_value]
        if not candidates:
            return None
        result = process.extractOne(
            name.lower(),
            [cat.name.lower() for cat in candidates],
            scorer=fuzz.token_sort_ratio,
        )
        if result is None:
            return None
        _, score, index = result
        if score < NAME_MATCH_THRESHOLD:
            return None
        return candidates[index]
