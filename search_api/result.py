"""Outcome of a single HTTP exchange with OpenSearch."""

from dataclasses import dataclass
from typing import Literal

from search_api.types import JSON


@dataclass(frozen=True)
class HttpError:
    """OpenSearch answered with a non-2xx status.

    The body is the engine's decoded error document when it sent JSON,
    otherwise the raw response text.
    """

    status: int
    body: JSON

    def describe(self) -> str:
        return f"OpenSearch returned HTTP {self.status}: {self.body}"


@dataclass(frozen=True)
class TransportFailure:
    """The exchange did not complete (connection, timeout, TLS or decoding)."""

    description: str

    def describe(self) -> str:
        return self.description


class SearchRequestError(Exception):
    """Raised by ``Err.unwrap`` for callers that prefer exceptions."""

    def __init__(self, error: HttpError | TransportFailure):
        super().__init__(error.describe())
        self.error = error


@dataclass(frozen=True)
class Ok:
    """Successful exchange carrying the decoded response body."""

    body: JSON
    ok: Literal[True] = True

    def unwrap(self) -> JSON:
        return self.body


@dataclass(frozen=True)
class Err:
    """Failed exchange."""

    error: HttpError | TransportFailure
    ok: Literal[False] = False

    @property
    def status(self) -> int | None:
        """HTTP status of a protocol failure, None for transport failures."""
        return self.error.status if isinstance(self.error, HttpError) else None

    def unwrap(self) -> JSON:
        raise SearchRequestError(self.error)


type Result = Ok | Err
