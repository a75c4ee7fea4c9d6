"""Errors raised while interpreting game server events."""


class DojoError(Exception):
    """Base class for holdem-dojo errors."""


class UnknownCardToken(DojoError, ValueError):
    """A rank or suit token matched none of the recognized literals."""

    def __init__(self, token: str, kind: str = "card") -> None:
        self.token = token
        self.kind = kind
        super().__init__(f"Unknown {kind} token: {token!r}")


class MalformedEvent(DojoError, ValueError):
    """An event payload is missing required fields or has the wrong shape."""
