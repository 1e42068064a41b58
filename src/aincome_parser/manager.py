import datetime as dt
from collections.abc import Sequence

from aincome_parser.domain.results import as_list
from aincome_parser.extraction.categories import ensure_unique_ids
from aincome_parser.integration.llm import llm_configured
from aincome_parser.logger import get_logger
from aincome_parser.models import Category, ParseResult
from aincome_parser.parsers.base import TransactionParser
from aincome_parser.parsers.fallback import FallbackParser
from aincome_parser.parsers.llm import LLMTransactionParser

logger = get_logger(__name__)


class ParserService:
    def __init__(self, use_llm: bool | None = None):
        self.parsers: list[TransactionParser] = []

        # 1. Model-based parser, only when an API key is configured
        if use_llm is None:
            use_llm = llm_configured()
        if use_llm:
            self.llm: LLMTransactionParser | None = LLMTransactionParser()
            self.parsers.append(self.llm)
            logger.info(f"LLM parser enabled: model={self.llm.model}")
        else:
            self.llm = None
            logger.info("OPENAI_API_KEY not found. LLM parser disabled, using rule-based parsing only.")

        # 2. Rule-based parser (always last)
        self.fallback = FallbackParser()
        self.parsers.append(self.fallback)

    def parse(
        self,
        message: str,
        categories: Sequence[Category],
        *,
        user_id: str | None = None,
        now: dt.datetime | dt.date | None = None,
        use_llm: bool = True,
    ) -> ParseResult:
        ensure_unique_ids(categories)
        for parser in self.parsers:
            if parser is self.llm and not use_llm:
                continue
            logger.debug(f"Trying {parser.name} parser for: '{message[:50]}...'")

            result = parser.parse(message, categories, user_id=user_id, now=now)

            if result:
                logger.debug(f"{parser.name} parser returned {len(as_list(result))} transaction(s).")
                return result
            logger.debug(f"{parser.name} parser returned: None")

        logger.debug(f"No parser matched for: '{message[:50]}...'")
        return None
