import datetime as dt
from abc import ABC, abstractmethod
from collections.abc import Sequence

from aincome_parser.models import Category, ParseResult


class TransactionParser(ABC):
    name: str = "parser"

    @abstractmethod
    def parse(
        self,
        message: str,
        categories: Sequence[Category],
        *,
        user_id: str | None = None,
        now: dt.datetime | dt.date | None = None,
    ) -> ParseResult:
        """Turn a free-text message into one transaction, several, or ``None``."""
        pass
