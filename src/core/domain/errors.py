"""Failure kinds for the poem fetch.

The fetch never raises to its caller; failures are reported as a
`FetchFailure` (logged and, optionally, handed to a hook) and the caller only
sees an absent poem.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

INVALID_ADDRESS_MESSAGE = "Invalid address"
FETCH_FAILED_MESSAGE = "Could not retrieve data from endpoint, or could not decode data."
DIAGNOSTIC_SEPARATOR = "----"


class FetchErrorKind(str, Enum):
    """Closed set of reasons a fetch can come back empty-handed."""

    ADDRESS_INVALID = "address_invalid"
    TRANSPORT_FAILED = "transport_failed"
    DECODE_FAILED = "decode_failed"


@dataclass(frozen=True)
class FetchFailure:
    kind: FetchErrorKind
    message: str
    detail: str | None = None

    def render(self) -> str:
        """Diagnostic text: fixed message, separator, underlying error."""

        if self.detail is None:
            return self.message
        return f"{self.message}\n{DIAGNOSTIC_SEPARATOR}\n{self.detail}"
