from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from linkchain import ChainFunction, ComposeStrategy, Link
from linkchain._internal.composer import resolve_composer

Composer = Callable[..., Any]


@pytest.fixture(params=list(ComposeStrategy), ids=lambda s: s.value)
def strategy(request: pytest.FixtureRequest) -> ComposeStrategy:
    return request.param


@pytest.fixture
def composer(strategy: ComposeStrategy) -> Composer:
    return resolve_composer(strategy)


def prefix_link(prefix: str) -> Link[Callable[[], str]]:
    def link(call_next: Callable[[], str]) -> Callable[[], str]:
        def step() -> str:
            return f"{prefix}-{call_next()}"

        return step

    return link


def passthrough_link(call_next: ChainFunction) -> ChainFunction:
    return call_next
