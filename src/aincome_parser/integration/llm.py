import os

from openai import OpenAI

from aincome_parser.core import settings
from aincome_parser.logger import get_logger

logger = get_logger(__name__)


def build_client(
    api_key: str | None = None,
    base_url: str | None = None,
    timeout: float | None = None,
) -> OpenAI:
    return OpenAI(
        api_key=api_key or os.getenv("OPENAI_API_KEY"),
        base_url=base_url or os.getenv("OPENAI_BASE_URL") or None,
        timeout=timeout or settings.get_env_float("OPENAI_TIMEOUT", settings.DEFAULT_OPENAI_TIMEOUT),
        max_retries=0,
    )


def llm_configured() -> bool:
    return bool(os.getenv("OPENAI_API_KEY"))


def default_model() -> str:
    return os.getenv("OPENAI_MODEL") or settings.DEFAULT_OPENAI_MODEL


def extract_output_text(response: object) -> str | None:
    output_text = getattr(response, "output_text", None)
    if output_text:
        return output_text

    output = getattr(response, "output", None)
    if not output:
        return None

    parts: list[str] = []
    for item in output:
        content = getattr(item, "content", None)
        if not content:
            continue
        for block in content:
            if getattr(block, "type", None) in {"output_text", "text"}:
                text = getattr(block, "text", None)
                if text:
                    parts.append(text)

    if parts:
        return "".join(parts)
    return None
