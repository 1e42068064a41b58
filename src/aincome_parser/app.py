from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from aincome_parser.api.routes import chat, intent, parse
from aincome_parser.core import settings
from aincome_parser.intent import IntentClassifier
from aincome_parser.logger import get_logger, setup_logging
from aincome_parser.manager import ParserService
from aincome_parser.services.chat import ChatAssistant, ChatResponder

logger = get_logger(__name__)


def create_app() -> FastAPI:
    setup_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("Initializing services...")
        settings.log_environment()

        service = ParserService()
        classifier = IntentClassifier()
        assistant = ChatAssistant(
            service=service,
            responder=ChatResponder.from_environment(),
            classifier=classifier,
        )

        app.state.service = service
        app.state.classifier = classifier
        app.state.assistant = assistant

        logger.info("Services initialized.")
        yield
        logger.info("Service shutting down.")

    app = FastAPI(title="AIncome Parser", lifespan=lifespan)

    app.include_router(intent.router)
    app.include_router(parse.router)
    app.include_router(chat.router)

    return app


app = create_app()
