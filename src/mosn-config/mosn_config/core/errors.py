"""Base exception class for all mosn-config-specific errors."""


class MosnConfigError(Exception):
    """Base class for all mosn-config errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable
