from collections.abc import Sequence
from dataclasses import dataclass

from aincome_parser.extraction.keywords import CATEGORY_KEYWORDS, OTHER_CATEGORY_NAMES
from aincome_parser.extraction.normalizer import contains_any
from aincome_parser.models import Category, TransactionType

NAME_MATCH_SCORE = 1.0
KEYWORD_MATCH_SCORE = 0.8

MATCH_BONUS = 0.2
GUESS_PENALTY = 0.2


class DuplicateCategoryIdError(ValueError):
    """Raised when a caller hands over a category list with repeated ids."""


@dataclass(frozen=True)
class CategoryMatch:
    category: Category
    score: float
    guessed: bool = False

    @property
    def confidence_adjustment(self) -> float:
        if self.score > 0:
            return MATCH_BONUS
        if self.guessed:
            return -GUESS_PENALTY
        return 0.0


def ensure_unique_ids(categories: Sequence[Category]) -> None:
    seen: set[str] = set()
    duplicates: list[str] = []
    for category in categories:
        if category.id in seen:
            duplicates.append(category.id)
        seen.add(category.id)
    if duplicates:
        raise DuplicateCategoryIdError(f"Duplicate category ids: {', '.join(sorted(set(duplicates)))}")


def score_category(text: str, category: Category) -> float:
    name = category.name.lower()
    if name in text:
        return NAME_MATCH_SCORE
    if contains_any(text, CATEGORY_KEYWORDS.get(name, ())):
        return KEYWORD_MATCH_SCORE
    return 0.0


def _is_other_category(category: Category) -> bool:
    return category.name in OTHER_CATEGORY_NAMES or category.name.lower() == "other"


def match_category(
    text: str, transaction_type: TransactionType, categories: Sequence[Category]
) -> CategoryMatch | None:
    """
    Pick the best category of ``transaction_type`` for the normalized ``text``.

    Degrades from a name or keyword hit, to a category called "Khác"/"Other",
    to the first category of the type (flagged as guessed). Returns ``None``
    when the list has no category of that type at all.
    """
    candidates = [category for category in categories if category.type == transaction_type]
    if not candidates:
        return None

    best: CategoryMatch | None = None
    for category in candidates:
        score = score_category(text, category)
        # Strict comparison keeps the earliest category on ties.
        if score > 0 and (best is None or score > best.score):
            best = CategoryMatch(category=category, score=score)
    if best:
        return best

    for category in candidates:
        if _is_other_category(category):
            return CategoryMatch(category=category, score=0.0)

    return CategoryMatch(category=candidates[0], score=0.0, guessed=True)
