"""Typing contract for chains.

``Link`` and ``Terminal`` are distinct aliases so static checkers can tell
the two roles apart. At runtime the role is decided by position alone.
"""

from linkchain._internal.common.types import (
    ChainFactory,
    ChainFunction,
    ChainFunctionT,
    LastFunctionT,
    Link,
    Terminal,
)

__all__ = (
    "ChainFactory",
    "ChainFunction",
    "ChainFunctionT",
    "LastFunctionT",
    "Link",
    "Terminal",
)
