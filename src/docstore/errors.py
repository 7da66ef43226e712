"""Repository error types"""


class InvalidArgumentError(ValueError):
    """Raised when a repository operation receives an argument it cannot accept."""
