import asyncio
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException

from aincome_parser.api.dependencies import get_service
from aincome_parser.api.schemas import ParseRequest, ParseResponse
from aincome_parser.core import settings
from aincome_parser.domain.defaults import default_categories
from aincome_parser.domain.results import as_list, auto_apply_reason, build_confirmation_payload
from aincome_parser.extraction.categories import DuplicateCategoryIdError
from aincome_parser.logger import get_logger
from aincome_parser.manager import ParserService
from aincome_parser.models import Category

logger = get_logger(__name__)

router = APIRouter(prefix="/api")


@router.post("/parse", response_model=ParseResponse)
async def parse_message(
    req: ParseRequest,
    service: Annotated[ParserService, Depends(get_service)],
) -> ParseResponse:
    categories = req.categories if req.categories is not None else default_categories()
    try:
        result = await asyncio.to_thread(
            service.parse,
            req.message,
            categories,
            user_id=req.user_id,
            now=req.now,
            use_llm=req.use_ai,
        )
    except DuplicateCategoryIdError as exc:
        logger.warning(f"[PARSE] Rejected category list: {exc}")
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    transactions = as_list(result)
    threshold = settings.get_auto_apply_threshold()
    return ParseResponse(
        transactions=[build_confirmation_payload(tx, threshold) for tx in transactions],
        count=len(transactions),
        source=transactions[0].source if transactions else None,
        auto_apply=[auto_apply_reason(tx, threshold) for tx in transactions],
    )


@router.get("/categories/defaults", response_model=list[Category])
async def get_default_categories() -> list[Category]:
    return default_categories()
