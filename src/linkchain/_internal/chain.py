from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, final

from linkchain._internal.common.constants import ComposeStrategy
from linkchain._internal.common.types import ChainFunctionT
from linkchain._internal.composer import resolve_composer

if TYPE_CHECKING:
    from collections.abc import Sequence

    from linkchain._internal.common.types import (
        LastFunctionT,
        Link,
        Terminal,
    )

logger = logging.getLogger("linkchain.chain")


@final
class Chain(Generic[ChainFunctionT]):
    """Ordered registry of links that composes a fresh chain on demand.

    Registered links are kept between calls, but every :meth:`compose` call
    builds a new sequence ending in the given terminal, so composing never
    mutates the registry.
    """

    __slots__: tuple[str, ...] = ("_links", "_strategy")

    def __init__(
        self,
        links: Sequence[Link[ChainFunctionT]] | None = None,
        *,
        strategy: ComposeStrategy | str = ComposeStrategy.RECURSIVE,
    ) -> None:
        self._links: list[Link[ChainFunctionT]] = list(links) if links else []
        self._strategy: ComposeStrategy = ComposeStrategy(strategy)

    def __len__(self) -> int:
        return len(self._links)

    @property
    def links(self) -> tuple[Link[ChainFunctionT], ...]:
        return tuple(self._links)

    @property
    def strategy(self) -> ComposeStrategy:
        return self._strategy

    def use(self, *links: Link[ChainFunctionT]) -> None:
        self._links.extend(links)
        logger.debug(
            "Registered %d link(s), chain now holds %d",
            len(links),
            len(self._links),
        )

    def compose(
        self,
        terminal: Terminal[LastFunctionT] | None = None,
    ) -> ChainFunctionT | LastFunctionT:
        """Compose the registered links in front of ``terminal``.

        Without a terminal the last registered link takes the terminal
        position and is called with no arguments.
        """
        factories: list[Any] = list(self._links)
        if terminal is not None:
            factories.append(terminal)
        composer = resolve_composer(self._strategy)
        return composer(factories)
