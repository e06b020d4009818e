import logging
from collections.abc import Callable
from typing import Any
from unittest import mock

import pytest

from linkchain import Chain, ComposeStrategy
from linkchain.exceptions import InvalidChainError
from tests.conftest import passthrough_link, prefix_link


class SkipOnce:
    def __init__(self) -> None:
        self.skip: bool = False

    def __call__(self, call_next: Callable[[int], Any]) -> Callable[[int], Any]:
        def step(num: int) -> Any:
            if self.skip:
                return None
            self.skip = True
            return call_next(num)

        return step


def test_common_case(strategy: ComposeStrategy) -> None:
    chain: Chain[Callable[[int], Any]] = Chain(strategy=strategy)
    chain.use(SkipOnce())
    target = mock.Mock(return_value="test")

    assert chain.compose(lambda: target)(2) == "test"
    target.assert_called_once_with(2)
    target.reset_mock()

    assert chain.compose(lambda: target)(2) is None
    target.assert_not_called()


def test_use_appends_in_order(strategy: ComposeStrategy) -> None:
    chain = Chain([prefix_link("1")], strategy=strategy)
    chain.use(prefix_link("2"), prefix_link("3"))

    assert len(chain) == 3
    assert chain.compose(lambda: lambda: "end")() == "1-2-3-end"


def test_compose_keeps_registry_intact() -> None:
    first = prefix_link("1")
    chain = Chain([first])

    chain.compose(lambda: lambda: "a")
    chain.compose(lambda: lambda: "b")

    assert chain.links == (first,)
    assert chain.compose(lambda: lambda: "c")() == "1-c"


def test_compose_without_terminal(strategy: ComposeStrategy) -> None:
    chain = Chain([passthrough_link], strategy=strategy)
    chain.use(lambda: lambda: "end")

    assert chain.compose()() == "end"


def test_empty_chain_without_terminal(strategy: ComposeStrategy) -> None:
    chain: Chain[Callable[[], str]] = Chain(strategy=strategy)

    with pytest.raises(InvalidChainError, match="no function found at index 0"):
        chain.compose()

    assert chain.compose(lambda: lambda: "end")() == "end"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("iterative", ComposeStrategy.ITERATIVE),
        ("recursive", ComposeStrategy.RECURSIVE),
        (ComposeStrategy.ITERATIVE, ComposeStrategy.ITERATIVE),
    ],
)
def test_strategy_from_string(value: str, expected: ComposeStrategy) -> None:
    assert Chain(strategy=value).strategy is expected


def test_unknown_strategy() -> None:
    with pytest.raises(ValueError, match="'sideways'"):
        Chain(strategy="sideways")


def test_iterative_chain_is_not_depth_bound() -> None:
    chain = Chain([passthrough_link] * 5000, strategy="iterative")

    assert chain.compose(lambda: lambda: "end")() == "end"


def test_logging(caplog: pytest.LogCaptureFixture) -> None:
    chain = Chain(strategy=ComposeStrategy.ITERATIVE)
    with caplog.at_level(logging.DEBUG, logger="linkchain"):
        chain.use(passthrough_link)
        chain.compose(lambda: lambda: None)

    assert [r.name for r in caplog.records] == [
        "linkchain.chain",
        "linkchain.composer",
    ]
    assert "(iterative)" in caplog.records[1].getMessage()
