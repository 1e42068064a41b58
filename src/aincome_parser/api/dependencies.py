from fastapi import HTTPException, Request

from aincome_parser.intent import IntentClassifier
from aincome_parser.manager import ParserService
from aincome_parser.services.chat import ChatAssistant


def get_service(request: Request) -> ParserService:
    service = getattr(request.app.state, "service", None)
    if not service:
        raise HTTPException(status_code=500, detail="Service not initialized")
    return service


def get_assistant(request: Request) -> ChatAssistant:
    assistant = getattr(request.app.state, "assistant", None)
    if not assistant:
        raise HTTPException(status_code=500, detail="Service not initialized")
    return assistant


def get_classifier(request: Request) -> IntentClassifier:
    return getattr(request.app.state, "classifier", None) or IntentClassifier()
