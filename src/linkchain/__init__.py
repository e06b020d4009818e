"""Sequential function composition for the linkchain library.

This module exposes the chain composer and the reusable ``Chain`` registry.
A chain is an ordered sequence of links, each receiving the rest of the
chain as its continuation, closed by a terminal that receives nothing.
"""

from importlib.metadata import version as get_version

from linkchain._internal.chain import Chain
from linkchain._internal.common.constants import ComposeStrategy
from linkchain._internal.common.types import (
    ChainFactory,
    ChainFunction,
    Link,
    Terminal,
)
from linkchain._internal.composer import compose, compose_iterative, is_last

__version__ = get_version("linkchain")
__all__ = (
    "Chain",
    "ChainFactory",
    "ChainFunction",
    "ComposeStrategy",
    "Link",
    "Terminal",
    "compose",
    "compose_iterative",
    "is_last",
)
