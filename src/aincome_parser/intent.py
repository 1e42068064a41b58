import re

from aincome_parser.extraction.amount import has_digit
from aincome_parser.extraction.keywords import (
    GOODBYE_WORDS,
    GREETING_WORDS,
    MONEY_WORDS,
    QUESTION_WORDS,
    SPENDING_CATEGORY_WORDS,
    THANKS_WORDS,
    TIME_WORDS,
    TRANSACTION_VERBS,
)
from aincome_parser.extraction.normalizer import contains_any, normalize
from aincome_parser.logger import get_logger
from aincome_parser.models import ChatIntent, IntentClassificationResult

logger = get_logger(__name__)

SHORT_MESSAGE_LENGTH = 15

# Digits immediately followed by a unit: "50k", "2tr", "100nghìn".
_CURRENCY_PATTERN = re.compile(r"[0-9]+(?:k|tr|triệu|nghìn|đồng|vnd)", re.IGNORECASE)

# (vocabulary, weight); each family counts at most once.
_SMALL_TALK_FAMILIES: tuple[tuple[tuple[str, ...], float], ...] = (
    (GREETING_WORDS, 0.4),
    (QUESTION_WORDS, 0.3),
    (THANKS_WORDS, 0.3),
    (GOODBYE_WORDS, 0.3),
)
_TRANSACTION_FAMILIES: tuple[tuple[tuple[str, ...], float], ...] = (
    (TRANSACTION_VERBS, 0.25),
    (MONEY_WORDS, 0.3),
    (SPENDING_CATEGORY_WORDS, 0.2),
    (TIME_WORDS, 0.15),
)


class IntentClassifier:
    """
    Routes a chat message to small talk, transaction entry, or unknown.

    Two scores are computed independently from disjoint vocabularies and the
    decision rules are applied in a fixed order, which is also the tie-break.
    """

    short_message_bonus = 0.2
    digit_bonus = 0.3
    currency_bonus = 0.4
    multi_signal_bonus = 0.2
    multi_signal_count = 3

    def small_talk_score(self, text: str) -> float:
        score = 0.0
        for vocabulary, weight in _SMALL_TALK_FAMILIES:
            if contains_any(text, vocabulary):
                score += weight
        if len(text) < SHORT_MESSAGE_LENGTH and not has_digit(text):
            score += self.short_message_bonus
        return min(score, 1.0)

    def transaction_score(self, text: str) -> float:
        score = 0.0
        matches = 0
        for vocabulary, weight in _TRANSACTION_FAMILIES:
            if contains_any(text, vocabulary):
                score += weight
                matches += 1
        if has_digit(text):
            score += self.digit_bonus
            matches += 1
        if _CURRENCY_PATTERN.search(text):
            score += self.currency_bonus
            matches += 1
        if matches >= self.multi_signal_count:
            score += self.multi_signal_bonus
        return min(score, 1.0)

    def classify(self, message: str) -> IntentClassificationResult:
        text = normalize(message)
        if not text:
            return IntentClassificationResult(intent=ChatIntent.UNKNOWN, confidence=0.0)

        small_talk = self.small_talk_score(text)
        transaction = self.transaction_score(text)
        logger.debug(f"[INTENT] small_talk={small_talk:.2f} transaction={transaction:.2f}")

        if transaction > small_talk and transaction > 0.3:
            return IntentClassificationResult(
                intent=ChatIntent.CREATE_TRANSACTION,
                confidence=min(transaction, 0.95),
            )
        if small_talk > 0.5:
            return IntentClassificationResult(
                intent=ChatIntent.SMALL_TALK,
                confidence=min(small_talk, 0.9),
            )
        if has_digit(text) and transaction > 0.2:
            return IntentClassificationResult(intent=ChatIntent.CREATE_TRANSACTION, confidence=0.7)
        return IntentClassificationResult(intent=ChatIntent.UNKNOWN, confidence=0.5)


_default_classifier = IntentClassifier()


def classify_intent(message: str) -> IntentClassificationResult:
    return _default_classifier.classify(message)
