class BaseLinkchainError(Exception):
    pass


class InvalidChainError(BaseLinkchainError):
    """Raised when composition reaches a position with no function."""

    def __init__(self, index: int) -> None:
        self.index: int = index
        super().__init__(f"Invalid chain: no function found at index {index}")
