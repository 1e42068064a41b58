import pytest

from aincome_parser.intent import IntentClassifier, classify_intent
from aincome_parser.models import ChatIntent


def test_greeting_is_small_talk() -> None:
    result = classify_intent("Chào bạn")
    assert result.intent == ChatIntent.SMALL_TALK
    assert result.confidence >= 0.5
    assert result.confidence == pytest.approx(0.6)


def test_transaction_message() -> None:
    result = classify_intent("Ăn phở 50k hôm nay")
    assert result.intent == ChatIntent.CREATE_TRANSACTION
    assert result.confidence == pytest.approx(0.95)


def test_thanks_and_goodbye() -> None:
    result = classify_intent("cảm ơn, tạm biệt")
    assert result.intent == ChatIntent.SMALL_TALK
    assert result.confidence == pytest.approx(0.6)


def test_digit_rule_applies_after_small_talk_check() -> None:
    # greeting 0.4 vs transaction 0.3: neither of the first two rules fires.
    result = classify_intent("hi 5")
    assert result.intent == ChatIntent.CREATE_TRANSACTION
    assert result.confidence == 0.7


def test_lone_verb_is_unknown() -> None:
    result = classify_intent("mua")
    assert result.intent == ChatIntent.UNKNOWN
    assert result.confidence == 0.5


def test_unrelated_text_is_unknown() -> None:
    result = classify_intent("lorem ipsum dolor sit")
    assert result.intent == ChatIntent.UNKNOWN
    assert result.confidence == 0.5


@pytest.mark.parametrize("message", ["", "   ", "\n\t"])
def test_empty_message(message: str) -> None:
    result = classify_intent(message)
    assert result.intent == ChatIntent.UNKNOWN
    assert result.confidence == 0.0


def test_scores_are_capped() -> None:
    classifier = IntentClassifier()
    assert classifier.transaction_score("ăn phở 50k hôm nay") == 1.0
    assert classifier.small_talk_score("xin chào, cảm ơn, bye, là gì") == 1.0


def test_currency_pattern_needs_adjacent_unit() -> None:
    classifier = IntentClassifier()
    # digit 0.3 + money word "k" 0.3; no adjacent unit, only two families.
    assert classifier.transaction_score("50 k") == pytest.approx(0.6)
    # digit 0.3 + money 0.3 + adjacent unit 0.4 + multi-signal 0.2
    assert classifier.transaction_score("50k") == 1.0


@pytest.mark.parametrize(
    "message",
    [
        "Chào bạn",
        "Nhận lương 15 triệu",
        "Mua xăng 200k, ăn trưa 45k",
        "bạn làm gì được?",
        "tạm biệt nhé",
        "123",
    ],
)
def test_confidence_in_unit_interval(message: str) -> None:
    result = classify_intent(message)
    assert 0.0 <= result.confidence <= 1.0
