from aincome_parser.intent import IntentClassifier, classify_intent
from aincome_parser.models import (
    Category,
    ChatIntent,
    IntentClassificationResult,
    ParsedTransaction,
    TransactionType,
)
from aincome_parser.parsers.fallback import FallbackParser, parse_fallback

__all__ = [
    "Category",
    "ChatIntent",
    "FallbackParser",
    "IntentClassificationResult",
    "IntentClassifier",
    "ParsedTransaction",
    "TransactionType",
    "classify_intent",
    "parse_fallback",
]
