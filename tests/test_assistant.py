"""
Integration tests for the Oracle assistant and its Flask API.
Runs the full answer chain against data/processos.json.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config import HELP_TOPICS, KNOWLEDGE_BASE_PATH
from core.assistant import OracleAssistant
from core.knowledge_base import KnowledgeBaseUnavailableError
from core.llm_backend import LLMBackend, LLMResult
from core.prompts import HELP_TITLE, LLM_TITLE, UNAVAILABLE_ERROR
from frontend.server import create_app
from tests.test_cases import TEST_CASES


class StubBackend(LLMBackend):
    """Backend returning a fixed result and recording what it was asked."""

    def __init__(self, result: LLMResult):
        self._result = result
        self.messages = []

    @property
    def name(self) -> str:
        return "stub"

    def generate(self, message, corpus):
        self.messages.append(message)
        return self._result


class RaisingBackend(StubBackend):
    """Backend whose provider call blows up."""

    def generate(self, message, corpus):
        raise RuntimeError("provider SDK bug")


# ── Fixtures ──────────────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def assistant():
    """Initialize the offline assistant once for all tests."""
    a = OracleAssistant(knowledge_base_path=KNOWLEDGE_BASE_PATH, llm_backend_name="offline")
    a.initialize()
    return a


@pytest.fixture
def client(assistant):
    return create_app(assistant).test_client()


@pytest.fixture
def broken_client(tmp_path):
    a = OracleAssistant(knowledge_base_path=tmp_path / "missing.json", llm_backend_name="offline")
    a.initialize()
    return create_app(a).test_client()


# ── Answer chain ──────────────────────────────────────────────────────────

class TestScenarios:

    @pytest.mark.parametrize(
        "test_case",
        TEST_CASES,
        ids=[tc["message"][:40] for tc in TEST_CASES],
    )
    def test_scenario(self, assistant, test_case):
        result = assistant.ask(test_case["message"])

        assert result["process_id"] == test_case["expected_id"]
        if test_case["expected_id"] is None:
            assert result["source"] == "help"
            assert result["titulo"] == HELP_TITLE
        else:
            assert result["source"] == "knowledge_base"


class TestAssistant:

    def test_match_returns_process_fields(self, assistant):
        result = assistant.ask("Como solicitar férias?")
        assert result["categoria"] == "RH"
        assert result["titulo"] == "Férias"
        assert result["answer"].startswith("Combine o período")

    def test_help_text_quotes_message_and_lists_topics(self, assistant):
        result = assistant.ask("qual a capital da frança")
        assert '"qual a capital da frança"' in result["answer"]
        for topic in HELP_TOPICS:
            assert f"• {topic}" in result["answer"]

    def test_llm_answer_skips_matcher(self):
        stub = StubBackend(LLMResult.success("Fale com o RH.", source="stub"))
        a = OracleAssistant(knowledge_base_path=KNOWLEDGE_BASE_PATH, llm_backend=stub)
        a.initialize()

        result = a.ask("Como solicitar férias?")
        assert result["source"] == "llm"
        assert result["answer"] == "Fale com o RH."
        assert result["titulo"] == LLM_TITLE
        assert result["process_id"] is None

    def test_llm_failure_falls_back_to_matcher(self):
        stub = StubBackend(LLMResult.failure("timeout"))
        a = OracleAssistant(knowledge_base_path=KNOWLEDGE_BASE_PATH, llm_backend=stub)
        a.initialize()

        result = a.ask("/vpn")
        assert stub.messages == ["Como configurar acesso VPN?"]
        assert result["source"] == "knowledge_base"
        assert result["process_id"] == "vpn-001"
        assert result["question"] == "/vpn"

    def test_raising_backend_falls_back_to_matcher(self):
        a = OracleAssistant(
            knowledge_base_path=KNOWLEDGE_BASE_PATH,
            llm_backend=RaisingBackend(LLMResult.failure("")),
        )
        a.initialize()

        result = a.ask("Como solicitar férias?")
        assert result["source"] == "knowledge_base"
        assert result["process_id"] == "rh-001"

    def test_help_text_quotes_message_as_sent(self, assistant):
        result = assistant.ask("  qual a capital da frança  ")
        assert '"  qual a capital da frança  "' in result["answer"]
        assert result["question"] == "qual a capital da frança"

    def test_not_initialized(self):
        with pytest.raises(RuntimeError):
            OracleAssistant().ask("Como solicitar férias?")

    def test_blank_message(self, assistant):
        with pytest.raises(ValueError):
            assistant.ask("   ")

    def test_unavailable_knowledge_base(self, tmp_path):
        a = OracleAssistant(knowledge_base_path=tmp_path / "missing.json")
        a.initialize()
        assert a.corpus == ()
        with pytest.raises(KnowledgeBaseUnavailableError):
            a.ask("Como solicitar férias?")

    def test_expand_command(self):
        assert OracleAssistant.expand_command(" /TI ") == "Como abrir chamado no suporte de TI?"
        assert OracleAssistant.expand_command("/desconhecido") == "/desconhecido"
        assert OracleAssistant.expand_command("ferias") == "ferias"

    def test_stats(self, assistant):
        stats = assistant.get_stats()
        assert stats["processes"] == 6
        assert stats["llm_backend"] == "offline"
        assert "RH" in stats["categories"]


# ── HTTP API ──────────────────────────────────────────────────────────────

class TestAssistantEndpoint:

    def test_answer(self, client):
        response = client.post("/api/assistant", json={"message": "quero tirar ferias"})
        assert response.status_code == 200
        data = response.get_json()
        assert data["categoria"] == "RH"
        assert data["titulo"] == "Férias"
        assert data["source"] == "knowledge_base"

    def test_help_response(self, client):
        response = client.post("/api/assistant", json={"message": "qual a capital da frança"})
        assert response.status_code == 200
        data = response.get_json()
        assert data["categoria"] == "Ajuda Geral"
        assert data["titulo"] == "Tópicos Disponíveis"

    @pytest.mark.parametrize("payload", [
        {},
        {"message": ""},
        {"message": "   "},
        {"message": 42},
        ["message"],
    ])
    def test_invalid_message(self, client, payload):
        response = client.post("/api/assistant", json=payload)
        assert response.status_code == 400
        data = response.get_json()
        assert data["error"] == "Mensagem é obrigatória"
        assert data["answer"]

    def test_non_json_body(self, client):
        response = client.post("/api/assistant", data="oi", content_type="text/plain")
        assert response.status_code == 400

    def test_knowledge_base_unavailable(self, broken_client):
        response = broken_client.post("/api/assistant", json={"message": "Como solicitar férias?"})
        assert response.status_code == 500
        assert response.get_json()["error"] == UNAVAILABLE_ERROR

    def test_raising_backend_still_answers_from_knowledge_base(self):
        a = OracleAssistant(
            knowledge_base_path=KNOWLEDGE_BASE_PATH,
            llm_backend=RaisingBackend(LLMResult.failure("")),
        )
        a.initialize()
        response = create_app(a).test_client().post(
            "/api/assistant", json={"message": "Como solicitar férias?"}
        )
        assert response.status_code == 200
        data = response.get_json()
        assert data["source"] == "knowledge_base"
        assert data["titulo"] == "Férias"

    def test_internal_error(self, client, monkeypatch):
        def broken_matcher(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("core.assistant.find_best_match", broken_matcher)
        response = client.post("/api/assistant", json={"message": "Como solicitar férias?"})
        assert response.status_code == 500
        assert response.get_json()["error"] == "Erro interno do servidor"


class TestOtherEndpoints:

    def test_suggestions(self, client):
        data = client.get("/api/suggestions").get_json()
        assert [s["prefix"] for s in data] == ["/arte", "/email", "/ga4", "/ti", "/ferias", "/vpn"]

    def test_stats(self, client):
        response = client.get("/api/stats")
        assert response.status_code == 200
        assert response.get_json()["processes"] == 6
