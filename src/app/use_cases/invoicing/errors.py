"""Errors returned by invoicing use cases"""

from dataclasses import dataclass
from typing import Optional
from libs.result import Error


@dataclass
class ServiceError(Error):
    """
    Use case failure wrapping the storage error that caused it

    str() renders "<message>: <cause>", e.g. "find service error: ...".
    """

    cause: Optional[BaseException] = None

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return super().__str__()

    @classmethod
    def wrap(cls, code: str, message: str, cause: BaseException) -> "ServiceError":
        return cls(code=code, message=message, reason=str(cause), cause=cause)
