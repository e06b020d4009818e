from collections.abc import Callable, Sequence
from typing import Any, TypeAlias

from typing_extensions import TypeVar

ChainFunction: TypeAlias = Callable[..., Any]

ChainFunctionT = TypeVar(
    "ChainFunctionT",
    bound=ChainFunction,
    default=ChainFunction,
)
LastFunctionT = TypeVar(
    "LastFunctionT",
    bound=ChainFunction,
    default=ChainFunctionT,
)

# A link receives the rest of the chain and returns its own step.
Link: TypeAlias = Callable[[ChainFunctionT], ChainFunctionT]
# The terminal has nothing after it, so it takes no continuation.
Terminal: TypeAlias = Callable[[], LastFunctionT]

ChainFactory: TypeAlias = Sequence[
    Link[ChainFunctionT] | Terminal[LastFunctionT]
]
