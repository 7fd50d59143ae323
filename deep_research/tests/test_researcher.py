"""
Tests for the researcher graph.

The model is scripted by a responder that looks at the researcher's own
history, so each test reads as the sequence of decisions the model makes.
"""

import asyncio

from deep_research.notes.schemas import Summary
from deep_research.researcher.graph.build import (
    create_initial_state,
    create_researcher_graph,
)
from deep_research.researcher.graph.config import ResearcherGraphConfig
from deep_research.researcher.nodes.routing import should_continue
from deep_research.shared.schemas.messages import (
    HumanTurn,
    ModelTurn,
    SystemTurn,
    ToolResultTurn,
)
from deep_research.shared.search.client import SearchResult
from deep_research.tests.fakes import (
    FakeLLM,
    FakeSearch,
    call,
    make_services,
    text_turn,
    tool_turn,
)


def _tool_results(turns):
    return [turn for turn in turns if isinstance(turn, ToolResultTurn)]


def _scripted_llm(steps, compressed="compressed findings"):
    """
    Answer the n-th THINKING call with ``steps[n]`` and compression with
    ``compressed``. Steps past the end produce a plain text turn.
    """

    def respond(turns, tools, max_tokens):
        if not tools:
            return text_turn(compressed)
        n = sum(1 for turn in turns if isinstance(turn, ModelTurn))
        if n < len(steps):
            return steps[n]
        return text_turn("enough information gathered")

    return FakeLLM(
        respond=respond,
        respond_structured=lambda turns, schema: Summary(
            summary="page summary", key_excerpts="excerpt"
        ),
    )


def _run(services, topic="history of solar panels", config=None):
    graph = create_researcher_graph(services, config)
    return asyncio.run(
        graph.ainvoke(
            create_initial_state(topic, session_id="test"),
            config={"recursion_limit": 100},
        )
    )


# ============================================================================
# TestResearchLoop
# ============================================================================


class TestResearchLoop:
    """Tests for the THINKING / ACTING / SUMMARIZING loop."""

    def test_search_then_reflect_then_compress(self):
        """A full loop should answer every call and compress the findings."""
        llm = _scripted_llm(
            [
                tool_turn(call("tavily_search", "s1", query="solar history")),
                tool_turn(call("think_tool", "t1", reflection="have enough")),
            ]
        )
        search = FakeSearch(
            {
                "solar history": [
                    SearchResult(
                        url="https://solar.example",
                        title="Solar",
                        content="snippet",
                        raw_content="a long page",
                    )
                ]
            }
        )

        result = _run(make_services(llm, search))

        assert result["compressed_research"] == "compressed findings"
        assert result["tool_call_iterations"] == 2
        assert search.queries == ["solar history"]

        results = _tool_results(result["researcher_messages"])
        assert [r.tool_call_id for r in results] == ["s1", "t1"]
        assert "--- SOURCE 1: Solar ---" in results[0].content
        assert "page summary" in results[0].content
        assert results[1].content == "Reflection recorded: have enough"

        assert len(result["raw_notes"]) == 1
        assert "Reflection recorded: have enough" in result["raw_notes"][0]
        assert "enough information gathered" in result["raw_notes"][0]

    def test_immediate_answer_skips_tools(self):
        """A model that answers straight away should go directly to compression."""
        llm = _scripted_llm([text_turn("I already know this")])

        result = _run(make_services(llm))

        assert result["tool_call_iterations"] == 0
        assert result["compressed_research"] == "compressed findings"
        assert result["raw_notes"] == ["I already know this"]

    def test_parallel_calls_answered_in_order(self):
        """Several calls in one turn should all be answered, in call order."""
        llm = _scripted_llm(
            [
                tool_turn(
                    call("tavily_search", "a", query="q1"),
                    call("think_tool", "b", reflection="r"),
                    call("tavily_search", "c", query="q2"),
                )
            ]
        )

        result = _run(make_services(llm, FakeSearch()))

        results = _tool_results(result["researcher_messages"])
        assert [r.tool_call_id for r in results] == ["a", "b", "c"]
        assert result["tool_call_iterations"] == 1

    def test_unknown_tool_gets_error_result(self):
        """An unknown tool should be answered with a not-found error, loop continues."""
        llm = _scripted_llm([tool_turn(call("web_browse", "x1", url="https://a"))])

        result = _run(make_services(llm))

        results = _tool_results(result["researcher_messages"])
        assert len(results) == 1
        assert results[0].content == "Error: tool 'web_browse' not found."
        assert result["compressed_research"] == "compressed findings"

    def test_search_failure_becomes_error_result(self):
        """A failing search should become an error result, not a crash."""
        llm = _scripted_llm([tool_turn(call("tavily_search", "s1", query="q"))])
        search = FakeSearch(error=RuntimeError("service down"))

        result = _run(make_services(llm, search))

        results = _tool_results(result["researcher_messages"])
        assert results[0].content == "Error executing tool 'tavily_search': service down"

    def test_empty_search_gives_sentinel(self):
        """A search with no results should return the no-results message."""
        llm = _scripted_llm([tool_turn(call("tavily_search", "s1", query="nothing"))])

        result = _run(make_services(llm, FakeSearch()))

        results = _tool_results(result["researcher_messages"])
        assert results[0].content.startswith("No valid search results found.")


# ============================================================================
# TestPromptsAndLimits
# ============================================================================


class TestPromptsAndLimits:
    """Tests for what the researcher sends to the model."""

    def test_thinking_call_binds_tools_and_system_prompt(self):
        """THINKING calls should carry the research prompt and both tools."""
        llm = _scripted_llm([text_turn("done")])

        _run(make_services(llm), topic="wind turbines")

        first = llm.calls[0]
        assert isinstance(first["turns"][0], SystemTurn)
        assert first["turns"][0].content.startswith("You are a research assistant")
        assert first["turns"][1] == HumanTurn(content="wind turbines")
        assert first["tools"] == ["tavily_search", "think_tool"]
        assert first["model"] == "gpt-4.1"

    def test_compression_call_uses_token_ceiling_and_topic(self):
        """Compression should be capped and end with the topic reminder."""
        llm = _scripted_llm([text_turn("done")])
        config = ResearcherGraphConfig(compress_max_tokens=1234)

        _run(make_services(llm), topic="wind turbines", config=config)

        compress = llm.calls[-1]
        assert compress["tools"] == []
        assert compress["max_tokens"] == 1234
        last = compress["turns"][-1]
        assert isinstance(last, HumanTurn)
        assert "RESEARCH TOPIC: wind turbines" in last.content

    def test_search_uses_configured_result_count(self):
        """The search tool should request the configured number of results."""
        llm = _scripted_llm([tool_turn(call("tavily_search", "s1", query="q"))])
        search = FakeSearch(
            {"q": [SearchResult(url=f"https://{i}", title=str(i)) for i in range(5)]}
        )
        config = ResearcherGraphConfig(max_search_results=2)

        result = _run(make_services(llm, search), config=config)

        content = _tool_results(result["researcher_messages"])[0].content
        assert "SOURCE 2" in content
        assert "SOURCE 3" not in content


# ============================================================================
# TestRouting
# ============================================================================


class TestRouting:
    """Tests for should_continue."""

    def test_tool_calls_route_to_tool_node(self):
        state = {
            "researcher_messages": [tool_turn(call("think_tool", "t", reflection="r"))],
        }
        assert should_continue(state) == "tool_node"

    def test_no_tool_calls_route_to_compress(self):
        state = {"researcher_messages": [text_turn("answer")]}
        assert should_continue(state) == "compress_research"
