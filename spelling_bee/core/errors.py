"""Error taxonomy for tool invocations."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Classification attached to every failed tool call."""

    INVALID_ARGUMENT = "invalid_argument"
    RESOURCE_UNAVAILABLE = "resource_unavailable"
    METHOD_NOT_FOUND = "method_not_found"
    INTERNAL = "internal"


class SpellingBeeError(Exception):
    """Base class for errors raised while serving a tool call."""

    kind: ErrorKind = ErrorKind.INTERNAL


class InvalidArgumentError(SpellingBeeError, ValueError):
    """Request arguments are missing or have the wrong shape."""

    kind = ErrorKind.INVALID_ARGUMENT


class ResourceUnavailableError(SpellingBeeError):
    """The word corpus could not be read."""

    kind = ErrorKind.RESOURCE_UNAVAILABLE

    def __init__(self, path: object, reason: BaseException | str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to read word corpus at {path}: {reason}")


class MethodNotFoundError(SpellingBeeError, LookupError):
    """A tool name outside the published catalogue was requested."""

    kind = ErrorKind.METHOD_NOT_FOUND

    def __init__(self, name: str, supported: tuple[str, ...] = ()) -> None:
        self.name = name
        self.supported = tuple(supported)
        message = f"Unknown tool: {name}"
        if self.supported:
            message = f"{message} (supported: {', '.join(self.supported)})"
        super().__init__(message)


__all__ = [
    "ErrorKind",
    "SpellingBeeError",
    "InvalidArgumentError",
    "ResourceUnavailableError",
    "MethodNotFoundError",
]
