from typing import Annotated

from fastapi import APIRouter, Depends

from aincome_parser.api.dependencies import get_classifier
from aincome_parser.api.schemas import IntentRequest
from aincome_parser.intent import IntentClassifier
from aincome_parser.models import IntentClassificationResult

router = APIRouter(prefix="/api")


@router.post("/intent", response_model=IntentClassificationResult)
async def classify_message(
    req: IntentRequest,
    classifier: Annotated[IntentClassifier, Depends(get_classifier)],
) -> IntentClassificationResult:
    return classifier.classify(req.message)
