from collections.abc import Sequence
from typing import Literal

from aincome_parser.models import ParsedTransaction, ParseResult

ConfidenceLevel = Literal["high", "medium", "low"]
AutoApplyReason = Literal["disabled", "missing_category", "low_confidence"]

HIGH_CONFIDENCE = 0.8
MEDIUM_CONFIDENCE = 0.6


def as_list(result: ParseResult) -> list[ParsedTransaction]:
    if result is None:
        return []
    if isinstance(result, ParsedTransaction):
        return [result]
    return list(result)


def collapse(transactions: Sequence[ParsedTransaction]) -> ParseResult:
    """One transaction is returned bare so single-entry callers keep working."""
    if not transactions:
        return None
    if len(transactions) == 1:
        return transactions[0]
    return list(transactions)


def confidence_level(confidence: float) -> ConfidenceLevel:
    if confidence >= HIGH_CONFIDENCE:
        return "high"
    if confidence >= MEDIUM_CONFIDENCE:
        return "medium"
    return "low"


def confidence_stars(confidence: float, scale: int = 5) -> int:
    return round(confidence * scale)


def auto_apply_reason(transaction: ParsedTransaction, threshold: float) -> AutoApplyReason | None:
    """
    Why ``transaction`` must be shown for confirmation, or ``None`` when it may
    be applied directly. A threshold of 0 or below disables auto-apply.
    """
    if threshold <= 0:
        return "disabled"
    if not transaction.category_id:
        return "missing_category"
    if transaction.confidence < threshold:
        return "low_confidence"
    return None


def build_confirmation_payload(transaction: ParsedTransaction, threshold: float) -> dict[str, object]:
    return {
        **transaction.model_dump(mode="json"),
        "confidence_level": confidence_level(transaction.confidence),
        "confidence_stars": confidence_stars(transaction.confidence),
        "confirmation_required": auto_apply_reason(transaction, threshold) is not None,
        "confirmation_reason": auto_apply_reason(transaction, threshold),
    }
