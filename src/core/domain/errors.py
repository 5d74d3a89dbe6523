"""Error taxonomy of the client.

Why a single hierarchy:
- Every layer either handles an `UpError` with a terminal action (e.g. clearing
  tokens) or propagates it unchanged, so callers only ever catch one root.
- `ReauthenticationRequired` groups the two errors that must route the user to
  the sign-in flow.
"""

from __future__ import annotations

from core.domain.enums import ResponseCode


class UpError(Exception):
    """Root of every error raised by the client core."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class MalformedRequestError(UpError):
    """A request could not be assembled (invalid host, bad URL).

    Programmer error: fail fast, never retried.
    """


class NetworkError(UpError):
    """Transport-level failure: no connectivity, timeout, broken response."""


class DecodingError(UpError):
    """The response body does not match the expected shape."""


class ServerError(UpError):
    """Non-2xx response, surfaced verbatim from the server failure body."""

    def __init__(self, *, code: int | None, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.status_code = status_code

    @property
    def response_code(self) -> ResponseCode | None:
        if self.code is None:
            return None
        try:
            return ResponseCode(self.code)
        except ValueError:
            return None

    @property
    def is_expired_authorization(self) -> bool:
        """True when the server rejected the access token itself."""

        if self.code == ResponseCode.INVALID_ACCESS_TOKEN:
            return True
        return self.code is None and self.status_code == 401

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}" if self.code is not None else self.message

    def __repr__(self) -> str:
        return f"ServerError(code={self.code!r}, message={self.message!r}, status_code={self.status_code!r})"


class ReauthenticationRequired(UpError):
    """Base for failures that force a full sign-in."""


class UnauthenticatedError(ReauthenticationRequired):
    """No credentials are available for an operation that needs them."""


class SessionExpiredError(ReauthenticationRequired):
    """Token reissue failed; the token store has been cleared."""
