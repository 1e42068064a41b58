import datetime as dt
from collections.abc import Sequence

from aincome_parser.domain.results import collapse
from aincome_parser.extraction.amount import extract_amount
from aincome_parser.extraction.categories import ensure_unique_ids, match_category
from aincome_parser.extraction.confidence import ConfidenceAggregator
from aincome_parser.extraction.direction import classify_direction
from aincome_parser.extraction.normalizer import normalize
from aincome_parser.extraction.notes import extract_note
from aincome_parser.extraction.segmenter import split_segments
from aincome_parser.logger import get_logger
from aincome_parser.models import Category, ParsedTransaction, ParseResult

from .base import TransactionParser

logger = get_logger(__name__)


def _resolve_date(now: dt.datetime | dt.date | None) -> dt.date:
    if now is None:
        return dt.date.today()
    if isinstance(now, dt.datetime):
        return now.date()
    return now


class FallbackParser(TransactionParser):
    """
    Rule-based extraction used in front of, or instead of, a model-based parser.
    Deterministic and stateless; confidence never exceeds 0.85.
    """

    name = "fallback"

    def parse_segment(
        self,
        segment: str,
        categories: Sequence[Category],
        *,
        today: dt.date,
    ) -> ParsedTransaction | None:
        text = normalize(segment)
        if not text:
            return None

        amount = extract_amount(text)
        if amount is None:
            logger.debug(f"[PARSE] No amount in segment '{segment[:50]}'.")
            return None

        confidence = ConfidenceAggregator()
        confidence.add(amount.confidence_bonus)

        direction = classify_direction(text)
        confidence.add(direction.confidence_bonus)

        category = match_category(text, direction.type, categories)
        if category is None:
            logger.debug(f"[PARSE] No {direction.type.value} category available for segment '{segment[:50]}'.")
            return None
        confidence.add(category.confidence_adjustment)

        return ParsedTransaction(
            type=direction.type,
            amount=amount.amount,
            category_id=category.category.id,
            category_name=category.category.name,
            note=extract_note(segment),
            date=today,
            confidence=confidence.value,
            source=self.name,
        )

    def parse(
        self,
        message: str,
        categories: Sequence[Category],
        *,
        user_id: str | None = None,
        now: dt.datetime | dt.date | None = None,
    ) -> ParseResult:
        ensure_unique_ids(categories)
        today = _resolve_date(now)

        segments = split_segments(message)
        parsed: list[ParsedTransaction] = []
        for segment in segments:
            transaction = self.parse_segment(segment, categories, today=today)
            if transaction is not None:
                parsed.append(transaction)

        if len(segments) > 1:
            logger.debug(f"[PARSE] {len(parsed)} of {len(segments)} segments parsed.")
        return collapse(parsed)


_default_parser = FallbackParser()


def parse_fallback(
    message: str,
    categories: Sequence[Category],
    now: dt.datetime | dt.date | None = None,
) -> ParseResult:
    return _default_parser.parse(message, categories, now=now)
