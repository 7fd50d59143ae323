"""
In-process fakes for the LLM and search services.

Responses are produced by responder callables so concurrent researchers
can each be answered according to their own history.
"""

import asyncio
import inspect
from typing import Any, Callable, Dict, List, Optional, Sequence

from deep_research.shared.llm.client import LLMService
from deep_research.shared.schemas.messages import (
    HumanTurn,
    ModelTurn,
    ToolCall,
    Turn,
)
from deep_research.shared.search.client import SearchResult, SearchService
from deep_research.shared.services import Services


def call(name: str, id: str, **args: Any) -> ToolCall:
    return ToolCall(name=name, id=id, args=args)


def tool_turn(*calls: ToolCall, content: str = "") -> ModelTurn:
    return ModelTurn(content=content, tool_calls=list(calls))


def text_turn(content: str) -> ModelTurn:
    return ModelTurn(content=content)


def first_human(turns: Sequence[Turn]) -> str:
    for turn in turns:
        if isinstance(turn, HumanTurn):
            return turn.content
    return ""


async def _resolve(value):
    if inspect.isawaitable(value):
        value = await value
    if isinstance(value, Exception):
        raise value
    return value


class FakeLLM(LLMService):
    """
    LLMService driven by responder callables.

    ``respond(turns, tool_names, max_tokens)`` answers ``invoke`` and
    ``respond_structured(turns, schema)`` answers ``invoke_structured``.
    Either may return a value, an awaitable, or an Exception to raise.
    """

    def __init__(
        self,
        respond: Optional[Callable] = None,
        respond_structured: Optional[Callable] = None,
    ):
        self.respond = respond or (lambda turns, tools, max_tokens: text_turn("done"))
        self.respond_structured = respond_structured
        self.calls: List[Dict[str, Any]] = []
        self.structured_calls: List[Dict[str, Any]] = []

    async def invoke(
        self,
        turns,
        tools=None,
        *,
        model=None,
        max_tokens=None,
        temperature=None,
    ) -> ModelTurn:
        tool_names = [tool.name for tool in tools or []]
        self.calls.append(
            {
                "turns": list(turns),
                "tools": tool_names,
                "model": model,
                "max_tokens": max_tokens,
            }
        )
        await asyncio.sleep(0)
        return await _resolve(self.respond(list(turns), tool_names, max_tokens))

    async def invoke_structured(self, turns, schema, *, model=None, temperature=None):
        self.structured_calls.append(
            {"turns": list(turns), "schema": schema, "model": model}
        )
        await asyncio.sleep(0)
        if self.respond_structured is None:
            raise RuntimeError("no structured responder configured")
        return await _resolve(self.respond_structured(list(turns), schema))


class FakeSearch(SearchService):
    """SearchService returning canned results per query."""

    def __init__(self, results: Optional[Dict[str, List[SearchResult]]] = None, error=None):
        self.results = results or {}
        self.error = error
        self.queries: List[str] = []

    async def search(self, query, max_results=3, topic="general", include_raw_content=True):
        self.queries.append(query)
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return list(self.results.get(query, []))[:max_results]


def make_services(llm: Optional[FakeLLM] = None, search: Optional[FakeSearch] = None) -> Services:
    return Services(llm=llm or FakeLLM(), search=search or FakeSearch())
