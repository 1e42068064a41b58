from dataclasses import dataclass

from aincome_parser.extraction.keywords import EXPENSE_KEYWORDS, INCOME_KEYWORDS
from aincome_parser.extraction.normalizer import contains_any
from aincome_parser.models import TransactionType

KEYWORD_MATCH_BONUS = 0.1


@dataclass(frozen=True)
class DirectionMatch:
    type: TransactionType
    matched: bool

    @property
    def confidence_bonus(self) -> float:
        return KEYWORD_MATCH_BONUS if self.matched else 0.0


def classify_direction(text: str) -> DirectionMatch:
    # Income wins whenever both vocabularies appear ("bán xe, trả nợ" is income).
    if contains_any(text, INCOME_KEYWORDS):
        return DirectionMatch(type=TransactionType.INCOME, matched=True)
    if contains_any(text, EXPENSE_KEYWORDS):
        return DirectionMatch(type=TransactionType.EXPENSE, matched=True)
    return DirectionMatch(type=TransactionType.EXPENSE, matched=False)
