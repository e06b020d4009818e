"""Custom exceptions for the linkchain library.

This module defines the errors that composing a chain can raise. Errors
raised by the links themselves are never wrapped and reach the caller
unchanged.
"""

from linkchain._internal.exceptions import (
    BaseLinkchainError,
    InvalidChainError,
)

__all__ = (
    "BaseLinkchainError",
    "InvalidChainError",
)
