"""Method channel call/result models."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ResultStatus(str, Enum):
    """Acknowledgment kinds sent back across the channel."""

    SUCCESS = "success"
    NOT_IMPLEMENTED = "not_implemented"
    ERROR = "error"


@dataclass(frozen=True)
class MethodCall:
    """A single invocation received on a channel."""

    method: str
    arguments: Any = None


@dataclass(frozen=True)
class MethodResult:
    """Acknowledgment for one MethodCall."""

    status: ResultStatus
    result: Any = None
    error_message: str | None = None

    @classmethod
    def success(cls, result: Any = None) -> "MethodResult":
        return cls(ResultStatus.SUCCESS, result)

    @classmethod
    def not_implemented(cls) -> "MethodResult":
        return cls(ResultStatus.NOT_IMPLEMENTED)

    @classmethod
    def error(cls, message: str) -> "MethodResult":
        return cls(ResultStatus.ERROR, error_message=message)
