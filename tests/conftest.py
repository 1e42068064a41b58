import datetime as dt

import pytest

from aincome_parser.models import Category, TransactionType

TODAY = dt.date(2025, 1, 13)


@pytest.fixture
def today() -> dt.date:
    return TODAY


@pytest.fixture
def categories() -> list[Category]:
    return [
        Category(id="c-food", name="Ăn uống", type=TransactionType.EXPENSE, icon="🍔"),
        Category(id="c-transport", name="Đi lại", type=TransactionType.EXPENSE, icon="🚗"),
        Category(id="c-shopping", name="Mua sắm", type=TransactionType.EXPENSE, icon="🛒"),
        Category(id="c-other", name="Khác", type=TransactionType.EXPENSE, icon="📦"),
        Category(id="c-salary", name="Lương", type=TransactionType.INCOME, icon="💰"),
        Category(id="c-bonus", name="Thưởng", type=TransactionType.INCOME, icon="🎁"),
    ]


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
