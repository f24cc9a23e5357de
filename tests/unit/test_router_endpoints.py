"""Tests for the health, categories and classification endpoints."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_intent_agent, get_settings_dependency
from src.app import app
from src.config.constants import API_APOLOGY_RESPONSE, APOLOGY_RESPONSE, BATCH_ERROR_RESPONSE
from src.config.settings import Settings
from src.orchestrator.pipeline import IntentAgent

GREETING_JSON = '{"intent":"greeting","confidence":0.92,"entities":{}}'


@pytest.fixture
def api_settings():
    return Settings(enable_reasoning=False)


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def use_llm(api_settings):
    """Route the endpoints through an IntentAgent backed by the given stub."""

    def _install(llm):
        agent = IntentAgent(api_settings, llm)
        app.dependency_overrides[get_settings_dependency] = lambda: api_settings
        app.dependency_overrides[get_intent_agent] = lambda: agent
        return agent

    return _install


# ==========================================
#  HEALTH & CATEGORIES
# ==========================================


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["service"] == "Intent Identifier"
    assert data["agent_status"] == "ready"
    assert "timestamp" in data


def test_categories(client):
    response = client.get("/api/categories")
    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 8
    assert data["categories"] == [
        "greeting",
        "question",
        "command",
        "information_request",
        "clarification",
        "feedback",
        "goodbye",
        "unknown",
    ]


# ==========================================
#  CLASSIFY
# ==========================================


def test_classify_happy_path(client, use_llm, make_llm):
    use_llm(make_llm([GREETING_JSON, "Hi! How can I help you today?"]))

    response = client.post("/api/classify", json={"message": "Hello there!"})

    assert response.status_code == 200
    data = response.json()
    assert data["intent"] == "greeting"
    assert data["confidence"] == 0.92
    assert data["entities"] == {}
    assert data["response"] == "Hi! How can I help you today?"
    assert data["error"] is None
    assert data["metadata"]["model"] == "llama3.2"
    assert isinstance(data["metadata"]["processingTime"], int)
    assert "timestamp" in data["metadata"]


def test_classify_entities(client, use_llm, make_llm):
    use_llm(
        make_llm(
            [
                '{"intent":"command","confidence":0.88,"entities":{"time":"3pm","day":"tomorrow"}}',
                "Done, your meeting is booked.",
            ]
        )
    )

    response = client.post("/api/classify", json={"message": "Book a meeting tomorrow at 3pm"})

    assert response.status_code == 200
    assert response.json()["entities"] == {"time": "3pm", "day": "tomorrow"}


@pytest.mark.parametrize("message", ["", "   "])
def test_classify_rejects_empty_message(client, use_llm, make_llm, message):
    llm = make_llm()
    use_llm(llm)

    response = client.post("/api/classify", json={"message": message})

    assert response.status_code == 400
    assert response.json()["detail"]["error"] == "Invalid input"
    assert llm.calls == []


def test_classify_rejects_long_message(client, use_llm, make_llm):
    use_llm(make_llm())

    response = client.post("/api/classify", json={"message": "a" * 1001})

    assert response.status_code == 400
    assert response.json()["detail"]["error"] == "Message too long"


def test_classify_accepts_message_at_limit(client, use_llm, make_llm):
    use_llm(make_llm(["no json", "ok"]))

    response = client.post("/api/classify", json={"message": "a" * 1000})

    assert response.status_code == 200


@pytest.mark.parametrize("body", [{"message": 123}, {"message": None}, {}])
def test_classify_rejects_invalid_payload(client, use_llm, make_llm, body):
    use_llm(make_llm())

    response = client.post("/api/classify", json=body)

    assert response.status_code == 422


def test_classify_llm_failure_still_answers(client, use_llm, make_llm):
    """Test that a dead LLM produces a structured result, not an HTTP error."""
    use_llm(make_llm(responder=lambda messages: ConnectionError("connection refused")))

    response = client.post("/api/classify", json={"message": "Hello there!"})

    assert response.status_code == 200
    data = response.json()
    assert data["intent"] == "unknown"
    assert data["confidence"] == 0.0
    assert data["response"] == APOLOGY_RESPONSE
    assert data["error"].startswith("Error generating response")


def test_classify_unexpected_failure_returns_500(client, api_settings):
    agent = MagicMock()
    agent.process_message = AsyncMock(side_effect=RuntimeError("boom"))
    app.dependency_overrides[get_settings_dependency] = lambda: api_settings
    app.dependency_overrides[get_intent_agent] = lambda: agent

    response = client.post("/api/classify", json={"message": "Hello there!"})

    assert response.status_code == 500
    data = response.json()
    assert data["error"] == "Processing failed"
    assert data["message"] == "boom"
    assert data["intent"] == "unknown"
    assert data["confidence"] == 0.0
    assert data["response"] == API_APOLOGY_RESPONSE


# ==========================================
#  CLASSIFY BATCH
# ==========================================


def test_classify_batch_keeps_order(client, use_llm, make_llm, kind_of):
    intents = {
        "Hello there!": GREETING_JSON,
        "What time is it?": '{"intent":"question","confidence":0.8,"entities":{}}',
        "Goodbye!": '{"intent":"goodbye","confidence":0.95,"entities":{}}',
    }

    def responder(messages):
        user_input = messages[1]["content"]
        if kind_of(messages) == "intent":
            return intents[user_input]
        return f"reply to {user_input}"

    use_llm(make_llm(responder=responder))

    response = client.post("/api/classify-batch", json={"messages": list(intents)})

    assert response.status_code == 200
    data = response.json()
    assert data["count"] == 3
    assert [r["intent"] for r in data["results"]] == ["greeting", "question", "goodbye"]
    assert [r["response"] for r in data["results"]] == [f"reply to {m}" for m in intents]
    assert all(r["metadata"] is None for r in data["results"])
    assert "timestamp" in data


def test_classify_batch_isolates_failures(client, use_llm, make_llm, kind_of):
    def responder(messages):
        user_input = messages[1]["content"]
        if kind_of(messages) == "intent":
            if user_input == "broken":
                return ConnectionError("ollama down")
            return GREETING_JSON
        return "hi"

    use_llm(make_llm(responder=responder))

    response = client.post("/api/classify-batch", json={"messages": ["Hello", "broken", "Hey"]})

    assert response.status_code == 200
    results = response.json()["results"]
    assert [r["intent"] for r in results] == ["greeting", "unknown", "greeting"]
    assert results[1]["confidence"] == 0.0
    assert results[1]["error"] == "Error identifying intent: ollama down"
    assert results[0]["error"] is None
    assert results[2]["error"] is None


def test_classify_batch_replaces_raised_item(client, api_settings):
    async def process_batch(messages):
        from src.orchestrator.pipeline import batch_error_result

        return [batch_error_result(RuntimeError("unexpected")) for _ in messages]

    agent = MagicMock()
    agent.process_batch = process_batch
    app.dependency_overrides[get_settings_dependency] = lambda: api_settings
    app.dependency_overrides[get_intent_agent] = lambda: agent

    response = client.post("/api/classify-batch", json={"messages": ["Hello"]})

    assert response.status_code == 200
    result = response.json()["results"][0]
    assert result["response"] == BATCH_ERROR_RESPONSE
    assert result["error"] == "unexpected"


def test_classify_batch_rejects_empty(client, use_llm, make_llm):
    use_llm(make_llm())

    response = client.post("/api/classify-batch", json={"messages": []})

    assert response.status_code == 400
    assert response.json()["detail"]["error"] == "Invalid input"


def test_classify_batch_rejects_too_many(client, use_llm, make_llm):
    llm = make_llm()
    use_llm(llm)

    response = client.post("/api/classify-batch", json={"messages": ["hi"] * 11})

    assert response.status_code == 400
    assert response.json()["detail"]["error"] == "Too many messages"
    assert llm.calls == []


def test_classify_batch_rejects_invalid_item(client, use_llm, make_llm):
    llm = make_llm()
    use_llm(llm)

    response = client.post("/api/classify-batch", json={"messages": ["hi", " "]})

    assert response.status_code == 400
    assert response.json()["detail"]["error"] == "Invalid input"
    assert llm.calls == []


def test_classify_batch_rejects_non_list(client, use_llm, make_llm):
    use_llm(make_llm())

    response = client.post("/api/classify-batch", json={"messages": "hi"})

    assert response.status_code == 422
