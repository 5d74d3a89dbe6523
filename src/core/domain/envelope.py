"""Result type produced once per request.

Sessions never raise for server/transport outcomes: they hand back a
`Success` or a `Failure`, and the facade decides whether to unwrap (raise)
or inspect it. This keeps the authenticated pipeline free of try/except
chains when it needs to look at a failure before deciding to reissue.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from core.domain.errors import ServerError, UpError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    data: T
    message: str = ""

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.data


@dataclass(frozen=True)
class Failure:
    error: UpError

    @property
    def ok(self) -> bool:
        return False

    @property
    def is_expired_authorization(self) -> bool:
        return isinstance(self.error, ServerError) and self.error.is_expired_authorization

    def unwrap(self) -> NoReturn:
        raise self.error


ResponseEnvelope = Union[Success[T], Failure]
