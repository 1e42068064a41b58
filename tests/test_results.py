import datetime as dt

import pytest

from aincome_parser.domain.results import (
    as_list,
    auto_apply_reason,
    build_confirmation_payload,
    collapse,
    confidence_level,
    confidence_stars,
)
from aincome_parser.models import ParsedTransaction, TransactionType


def _tx(confidence: float = 0.85, category_id: str = "c-food") -> ParsedTransaction:
    return ParsedTransaction(
        type=TransactionType.EXPENSE,
        amount=50_000,
        category_id=category_id,
        category_name="Ăn uống",
        note="Ăn phở",
        date=dt.date(2025, 1, 13),
        confidence=confidence,
    )


def test_collapse_and_as_list() -> None:
    one, two = _tx(), _tx(0.6)
    assert collapse([]) is None
    assert collapse([one]) is one
    assert collapse([one, two]) == [one, two]
    assert as_list(None) == []
    assert as_list(one) == [one]
    assert as_list([one, two]) == [one, two]


@pytest.mark.parametrize(
    ("confidence", "level", "stars"),
    [(0.85, "high", 4), (0.8, "high", 4), (0.6, "medium", 3), (0.4, "low", 2), (0.0, "low", 0)],
)
def test_confidence_presentation(confidence: float, level: str, stars: int) -> None:
    assert confidence_level(confidence) == level
    assert confidence_stars(confidence) == stars


def test_auto_apply_reason() -> None:
    assert auto_apply_reason(_tx(), 0.0) == "disabled"
    assert auto_apply_reason(_tx(category_id=""), 0.8) == "missing_category"
    assert auto_apply_reason(_tx(0.6), 0.8) == "low_confidence"
    assert auto_apply_reason(_tx(0.85), 0.8) is None


def test_confirmation_payload() -> None:
    payload = build_confirmation_payload(_tx(0.6), threshold=0.8)
    assert payload["amount"] == 50_000
    assert payload["date"] == "2025-01-13"
    assert payload["type"] == "expense"
    assert payload["confidence_level"] == "medium"
    assert payload["confirmation_required"] is True
    assert payload["confirmation_reason"] == "low_confidence"
