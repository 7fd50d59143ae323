"""
Tests for the end-to-end research pipeline.

Tests the top-level graph (scoping -> supervisor -> report), the HTTP API,
configuration overrides and the search client.
"""

import asyncio
from datetime import datetime

import httpx
import pytest
from fastapi.testclient import TestClient

from deep_research.graph.build import create_deep_research_graph, create_initial_state
from deep_research.graph.config import DeepResearchConfig, get_config
from deep_research.graph.orchestrator_api import get_graph
from deep_research.main import app
from deep_research.notes.schemas import Summary
from deep_research.prompts.builders import get_today
from deep_research.scoping import ClarifyWithUser, ResearchQuestion, create_scoping_graph
from deep_research.scoping.config import ScopingConfig
from deep_research.shared.schemas.messages import HumanTurn, ModelTurn
from deep_research.shared.search.client import SearchServiceError, TavilySearchService
from deep_research.tests.fakes import (
    FakeLLM,
    call,
    first_human,
    make_services,
    text_turn,
    tool_turn,
)


# ============================================================================
# Test Fixtures
# ============================================================================


def _make_structured(need_clarification=False):
    """Structured responder for scoping and page summaries."""

    def respond_structured(turns, schema):
        if schema is ClarifyWithUser:
            if need_clarification:
                return ClarifyWithUser(
                    need_clarification=True, question="Which regions do you care about?"
                )
            return ClarifyWithUser(
                need_clarification=False, verification="Starting research now."
            )
        if schema is ResearchQuestion:
            return ResearchQuestion(research_brief="Compare solar and wind energy")
        if schema is Summary:
            return Summary(summary="page summary", key_excerpts="excerpt")
        raise AssertionError(f"unexpected schema {schema}")

    return respond_structured


def _make_respond(supervisor_error=None):
    """Responder covering supervisor, researcher, compression and report calls."""

    def respond(turns, tools, max_tokens):
        if "ConductResearch" in tools:
            if supervisor_error is not None:
                return supervisor_error
            if any(isinstance(turn, ModelTurn) for turn in turns):
                return tool_turn(call("ResearchComplete", "done"))
            return tool_turn(
                call("ConductResearch", "c1", research_topic="solar"),
                call("ConductResearch", "c2", research_topic="wind"),
            )
        if tools:
            return text_turn(f"answer about {first_human(turns)}")
        if max_tokens is not None:
            return text_turn(f"{first_human(turns)} summary")
        return text_turn("FINAL REPORT")

    return respond


def _make_llm(need_clarification=False, supervisor_error=None):
    return FakeLLM(
        respond=_make_respond(supervisor_error),
        respond_structured=_make_structured(need_clarification),
    )


def _run(llm, config=None, text="Compare solar and wind"):
    graph = create_deep_research_graph(make_services(llm), config)
    return asyncio.run(
        graph.ainvoke(create_initial_state([HumanTurn(content=text)], session_id="test"))
    )


# ============================================================================
# TestDeepResearchGraph
# ============================================================================


class TestDeepResearchGraph:
    """Tests for the full scoping -> research -> report graph."""

    def test_full_run(self):
        """A clear request should produce a brief, notes and a report."""
        llm = _make_llm()

        result = _run(llm)

        assert result["need_clarification"] is False
        assert result["research_brief"] == "Compare solar and wind energy"
        assert result["notes"] == ["solar summary", "wind summary"]
        assert len(result["raw_notes"]) == 2
        assert result["final_report"] == "FINAL REPORT"
        assert result["errors"] == []
        assert result["messages"][1] == ModelTurn(content="Starting research now.")
        assert result["messages"][-1] == ModelTurn(
            content="Here is the final report: FINAL REPORT"
        )

    def test_report_prompt_carries_brief_and_findings(self):
        """The report call should see the brief and the joined notes."""
        llm = _make_llm()

        _run(llm)

        report_call = llm.calls[-1]
        prompt = report_call["turns"][0].content
        assert "<Research Brief>" in prompt
        assert "Compare solar and wind energy" in prompt
        assert "solar summary\nwind summary" in prompt

    def test_clarification_stops_pipeline(self):
        """An under-specified request should end with a question."""
        llm = _make_llm(need_clarification=True)

        result = _run(llm, text="Research energy")

        assert result["need_clarification"] is True
        assert result["messages"][-1].content == "Which regions do you care about?"
        assert result["research_brief"] is None
        assert result["final_report"] is None
        assert llm.calls == []

    def test_clarification_disabled(self):
        """With clarification off, no clarify call should be made."""
        llm = _make_llm(need_clarification=True)
        config = DeepResearchConfig(scoping=ScopingConfig(allow_clarification=False))

        result = _run(llm, config)

        assert result["final_report"] == "FINAL REPORT"
        schemas = [c["schema"] for c in llm.structured_calls]
        assert ClarifyWithUser not in schemas
        assert ResearchQuestion in schemas

    def test_supervisor_failure_recorded(self):
        """A failing research phase should record an error and still report."""
        llm = _make_llm(supervisor_error=RuntimeError("model offline"))

        result = _run(llm)

        assert result["errors"] == ["Research supervisor error: model offline"]
        assert result["notes"] == []
        assert result["final_report"] == "FINAL REPORT"


class TestScopingGraph:
    """Tests for the standalone scoping graph."""

    def test_brief_only(self):
        llm = _make_llm()
        graph = create_scoping_graph(make_services(llm))

        result = asyncio.run(
            graph.ainvoke(create_initial_state([HumanTurn(content="Compare solar and wind")]))
        )

        assert result["research_brief"] == "Compare solar and wind energy"
        assert llm.calls == []
        assert "Human: Compare solar and wind" in llm.structured_calls[0]["turns"][0].content


# ============================================================================
# TestResearchAPI
# ============================================================================


class TestResearchAPI:
    """Tests for the /api/research endpoints."""

    def _client(self, llm):
        graph = create_deep_research_graph(make_services(llm))
        app.dependency_overrides[get_graph] = lambda: graph
        return TestClient(app)

    def teardown_method(self):
        app.dependency_overrides.clear()

    def test_run_complete(self):
        client = self._client(_make_llm())

        response = client.post(
            "/api/research/run",
            json={"messages": [{"role": "user", "content": "Compare solar and wind"}]},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "complete"
        assert body["final_report"] == "FINAL REPORT"
        assert body["notes"] == ["solar summary", "wind summary"]
        assert body["session_id"]

    def test_run_needs_clarification(self):
        client = self._client(_make_llm(need_clarification=True))

        response = client.post(
            "/api/research/run",
            json={"messages": [{"role": "user", "content": "Research energy"}]},
        )

        body = response.json()
        assert body["status"] == "needs_clarification"
        assert body["question"] == "Which regions do you care about?"
        assert body["final_report"] is None

    def test_run_reports_errors(self):
        client = self._client(_make_llm(supervisor_error=RuntimeError("down")))

        response = client.post(
            "/api/research/run",
            json={"messages": [{"role": "user", "content": "Compare solar and wind"}]},
        )

        body = response.json()
        assert body["status"] == "error"
        assert body["errors"] == ["Research supervisor error: down"]

    def test_empty_conversation_rejected(self):
        client = self._client(_make_llm())

        response = client.post("/api/research/run", json={"messages": []})

        assert response.status_code == 422

    def test_health(self):
        client = TestClient(app)
        assert client.get("/health").json() == {"status": "healthy"}


# ============================================================================
# TestConfig
# ============================================================================


class TestConfig:
    """Tests for get_config overrides."""

    def test_defaults(self, monkeypatch):
        for name in (
            "MAIN_MODEL",
            "MAX_CONCURRENT_RESEARCH_UNITS",
            "MAX_RESEARCHER_ITERATIONS",
            "ALLOW_CLARIFICATION",
        ):
            monkeypatch.delenv(name, raising=False)

        config = get_config()

        assert config.supervisor.max_concurrent_research_units == 3
        assert config.supervisor.max_researcher_iterations == 6
        assert config.scoping.allow_clarification is True

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("MAIN_MODEL", "gpt-4o")
        monkeypatch.setenv("MAX_CONCURRENT_RESEARCH_UNITS", "5")
        monkeypatch.setenv("ALLOW_CLARIFICATION", "false")
        monkeypatch.setenv("TAVILY_MAX_RESULTS", "7")

        config = get_config()

        assert config.report_model == "gpt-4o"
        assert config.supervisor.model == "gpt-4o"
        assert config.researcher.model == "gpt-4o"
        assert config.supervisor.max_concurrent_research_units == 5
        assert config.scoping.allow_clarification is False
        assert config.researcher.max_search_results == 7

    def test_zero_concurrency_from_env_rejected(self, monkeypatch):
        monkeypatch.setenv("MAX_CONCURRENT_RESEARCH_UNITS", "0")

        with pytest.raises(ValueError):
            get_config()

    def test_arguments_beat_env(self, monkeypatch):
        monkeypatch.setenv("MAX_RESEARCHER_ITERATIONS", "10")

        config = get_config(max_researcher_iterations=2)

        assert config.supervisor.max_researcher_iterations == 2


def test_get_today_format():
    assert get_today(datetime(2026, 10, 18)) == "Sun Oct 18, 2026"


# ============================================================================
# TestTavilySearchService
# ============================================================================


class TestTavilySearchService:
    """Tests for the Tavily client against a mocked transport."""

    def _service(self, handler):
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return TavilySearchService(api_key="tvly-test", client=client)

    def test_search_parses_results(self):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = request.content
            return httpx.Response(
                200,
                json={
                    "results": [
                        {"url": "https://a", "title": "A", "content": "c", "raw_content": "full"},
                        {"url": "", "title": "no url"},
                    ]
                },
            )

        service = self._service(handler)

        async def search_and_close():
            try:
                return await service.search("solar", max_results=2)
            finally:
                await service.aclose()

        results = asyncio.run(search_and_close())

        assert [r.url for r in results] == ["https://a"]
        assert results[0].raw_content == "full"
        assert seen["auth"] == "Bearer tvly-test"
        assert b'"max_results": 2' in seen["body"] or b'"max_results":2' in seen["body"]

    def test_http_error_raises(self):
        service = self._service(lambda request: httpx.Response(500, json={}))

        with pytest.raises(SearchServiceError):
            asyncio.run(service.search("solar"))
