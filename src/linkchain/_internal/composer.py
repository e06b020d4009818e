from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, cast

from linkchain._internal.common.constants import ComposeStrategy
from linkchain._internal.exceptions import InvalidChainError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from linkchain._internal.common.types import (
        ChainFactory,
        ChainFunctionT,
        LastFunctionT,
    )

logger = logging.getLogger("linkchain.composer")


def is_last(chain: Sequence[Any], index: int = 0) -> bool:
    """Tell whether ``index`` is the terminal position of ``chain``.

    The decision is positional only: the element at ``index`` is never
    inspected.
    """
    return index == len(chain) - 1


def _get_current(chain: Sequence[Any], index: int) -> Any:  # noqa: ANN401
    if index < 0 or index >= len(chain):
        raise InvalidChainError(index)
    current = chain[index]
    if current is None:
        raise InvalidChainError(index)
    return current


def _compose_from(chain: Sequence[Any], index: int) -> Any:  # noqa: ANN401
    current = _get_current(chain, index)
    if is_last(chain, index):
        return current()
    return current(_compose_from(chain, index + 1))


def compose(
    chain: ChainFactory[ChainFunctionT, LastFunctionT],
    index: int = 0,
) -> ChainFunctionT | LastFunctionT:
    """Compose ``chain`` into a single callable, starting at ``index``.

    Every element before the last one is a link: it receives the composed
    rest of the chain and returns its own step. The last element is the
    terminal and is called with no arguments. Nothing is awaited or wrapped,
    so the result is whatever the outermost link returns.

    Raises:
        InvalidChainError: no function exists at a position composition
            reaches, including position 0 of an empty chain.

    """
    logger.debug(
        "Composing chain of %d function(s) from index %d (%s)",
        len(chain),
        index,
        ComposeStrategy.RECURSIVE.value,
    )
    return cast("ChainFunctionT | LastFunctionT", _compose_from(chain, index))


def compose_iterative(
    chain: ChainFactory[ChainFunctionT, LastFunctionT],
    index: int = 0,
) -> ChainFunctionT | LastFunctionT:
    """Compose ``chain`` like :func:`compose` without recursing.

    Positions are validated front to back before any factory runs, so a
    broken chain reports the same index as :func:`compose`. The terminal is
    then resolved first and each link is wrapped around it, last to first.
    """
    logger.debug(
        "Composing chain of %d function(s) from index %d (%s)",
        len(chain),
        index,
        ComposeStrategy.ITERATIVE.value,
    )
    factories = [_get_current(chain, index)]
    factories.extend(
        _get_current(chain, position)
        for position in range(index + 1, len(chain))
    )

    *links, terminal = factories
    call_next = terminal()
    for link in reversed(links):
        call_next = link(call_next)

    return cast("ChainFunctionT | LastFunctionT", call_next)


def resolve_composer(strategy: ComposeStrategy) -> Callable[..., Any]:
    if strategy is ComposeStrategy.ITERATIVE:
        return compose_iterative
    return compose
