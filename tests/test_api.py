from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from aincome_parser import replies
from aincome_parser.app import app
from aincome_parser.intent import IntentClassifier
from aincome_parser.manager import ParserService
from aincome_parser.services.chat import ChatAssistant, ChatResponder

client = TestClient(app)


@pytest.fixture(autouse=True)
def services() -> Generator[ParserService, None, None]:
    originals = {name: getattr(app.state, name, None) for name in ("service", "assistant", "classifier")}
    service = ParserService(use_llm=False)
    app.state.service = service
    app.state.classifier = IntentClassifier()
    app.state.assistant = ChatAssistant(service=service, responder=ChatResponder(history_limit=0))
    yield service
    for name, value in originals.items():
        if value is None:
            if hasattr(app.state, name):
                delattr(app.state, name)
        else:
            setattr(app.state, name, value)


def test_intent_endpoint() -> None:
    response = client.post("/api/intent", json={"message": "Ăn phở 50k hôm nay"})
    assert response.status_code == 200
    assert response.json()["intent"] == "create_transaction"


def test_parse_with_default_categories(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUTO_APPLY_THRESHOLD", "0")
    response = client.post(
        "/api/parse",
        json={"message": "Ăn phở 30k, cafe 50k", "now": "2025-01-13"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 2
    assert data["source"] == "fallback"
    assert [tx["amount"] for tx in data["transactions"]] == [30000, 50000]
    assert {tx["category_name"] for tx in data["transactions"]} == {"Ăn uống"}
    assert all(tx["date"] == "2025-01-13" for tx in data["transactions"])
    assert all(tx["confirmation_reason"] == "disabled" for tx in data["transactions"])
    assert data["auto_apply"] == ["disabled", "disabled"]


def test_parse_auto_apply_threshold(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AUTO_APPLY_THRESHOLD", "0.8")
    categories = [
        {"id": "salary", "name": "Lương", "type": "income", "icon": "💰"},
        {"id": "misc", "name": "Khác", "type": "expense"},
    ]
    response = client.post(
        "/api/parse",
        json={"message": "Nhận lương 15 triệu\nTiền điện 300", "categories": categories},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["auto_apply"] == [None, "low_confidence"]
    first, second = data["transactions"]
    assert first["category_id"] == "salary"
    assert first["confirmation_required"] is False
    assert second["category_id"] == "misc"
    assert second["confirmation_reason"] == "low_confidence"


def test_parse_nothing_found() -> None:
    response = client.post("/api/parse", json={"message": "xin chào"})
    assert response.status_code == 200
    assert response.json() == {"transactions": [], "count": 0, "source": None, "auto_apply": []}


def test_parse_rejects_duplicate_ids() -> None:
    categories = [
        {"id": "1", "name": "Ăn uống", "type": "expense"},
        {"id": "1", "name": "Đi lại", "type": "expense"},
    ]
    response = client.post("/api/parse", json={"message": "Ăn phở 30k", "categories": categories})
    assert response.status_code == 422


def test_default_categories() -> None:
    response = client.get("/api/categories/defaults")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 17
    assert len({cat["id"] for cat in data}) == 17


def test_chat_small_talk() -> None:
    response = client.post("/api/chat", json={"message": "Chào bạn"})
    assert response.status_code == 200
    data = response.json()
    assert data["intent"] == "small_talk"
    assert data["reply"] == replies.small_talk_reply("Chào bạn")


def test_chat_transaction() -> None:
    response = client.post("/api/chat", json={"message": "Nhận lương 15 triệu"})
    assert response.status_code == 200
    data = response.json()
    assert data["intent"] == "create_transaction"
    assert data["transactions"][0]["amount"] == 15000000
    assert data["transactions"][0]["category_name"] == "Lương"


def test_chat_welcome() -> None:
    response = client.get("/api/chat/welcome")
    assert response.json() == {"reply": replies.WELCOME}


def test_missing_service_is_an_error() -> None:
    delattr(app.state, "service")
    response = client.post("/api/parse", json={"message": "Ăn phở 30k"})
    assert response.status_code == 500
