import pytest

from aincome_parser.extraction.categories import (
    DuplicateCategoryIdError,
    ensure_unique_ids,
    match_category,
    score_category,
)
from aincome_parser.models import Category, TransactionType


def test_name_match_scores_highest(categories: list[Category]) -> None:
    match = match_category("nhận lương 15 triệu", TransactionType.INCOME, categories)
    assert match is not None
    assert match.category.id == "c-salary"
    assert match.score == 1.0
    assert match.confidence_adjustment == pytest.approx(0.2)


def test_keyword_match(categories: list[Category]) -> None:
    match = match_category("đi grab 45k", TransactionType.EXPENSE, categories)
    assert match is not None
    assert match.category.id == "c-transport"
    assert match.score == 0.8


def test_name_match_beats_earlier_keyword_match() -> None:
    categories = [
        Category(id="food", name="Ăn uống", type=TransactionType.EXPENSE),
        Category(id="shop", name="Mua sắm", type=TransactionType.EXPENSE),
    ]
    # "mua sắm" is a verbatim name hit; "ăn" only a keyword hit for food.
    match = match_category("mua sắm đồ ăn 300k", TransactionType.EXPENSE, categories)
    assert match is not None
    assert match.category.id == "shop"


def test_ties_keep_list_order() -> None:
    categories = [
        Category(id="food", name="Ăn uống", type=TransactionType.EXPENSE),
        Category(id="home", name="Nhà cửa", type=TransactionType.EXPENSE),
    ]
    # "nước" is a keyword of both categories.
    match = match_category("tiền nước 200k", TransactionType.EXPENSE, categories)
    assert match is not None
    assert match.category.id == "food"


def test_falls_back_to_other_category(categories: list[Category]) -> None:
    match = match_category("tiền điện 300", TransactionType.EXPENSE, categories)
    assert match is not None
    assert match.category.name == "Khác"
    assert not match.guessed
    assert match.confidence_adjustment == 0.0


def test_falls_back_to_first_category_with_penalty() -> None:
    categories = [
        Category(id="shop", name="Mua sắm", type=TransactionType.EXPENSE),
        Category(id="move", name="Đi lại", type=TransactionType.EXPENSE),
    ]
    match = match_category("tiền điện 300", TransactionType.EXPENSE, categories)
    assert match is not None
    assert match.category.id == "shop"
    assert match.guessed
    assert match.confidence_adjustment == pytest.approx(-0.2)


def test_english_other_category_is_recognized() -> None:
    categories = [
        Category(id="move", name="Đi lại", type=TransactionType.EXPENSE),
        Category(id="other", name="Other", type=TransactionType.EXPENSE),
    ]
    match = match_category("tiền điện 300", TransactionType.EXPENSE, categories)
    assert match is not None
    assert match.category.id == "other"


def test_no_category_of_type(categories: list[Category]) -> None:
    expense_only = [cat for cat in categories if cat.type == TransactionType.EXPENSE]
    assert match_category("nhận lương 10tr", TransactionType.INCOME, expense_only) is None
    assert match_category("ăn phở 30k", TransactionType.EXPENSE, []) is None


def test_score_uses_lowercased_name() -> None:
    category = Category(id="x", name="Cà Phê", type=TransactionType.EXPENSE)
    assert score_category("uống cà phê 30k", category) == 1.0


def test_duplicate_ids_fail_loudly() -> None:
    categories = [
        Category(id="dup", name="Ăn uống", type=TransactionType.EXPENSE),
        Category(id="dup", name="Lương", type=TransactionType.INCOME),
    ]
    with pytest.raises(DuplicateCategoryIdError):
        ensure_unique_ids(categories)
