"""Display state of the repository listing."""

from dataclasses import dataclass
from enum import Enum


class DisplayStateKind(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class DisplayState:
    """
    Tagged listing state: idle, loading, success or error(message).

    Only the ``error`` state carries a message. Instances compare by value,
    so ``state == DisplayState.success()`` is the idiomatic check.
    """

    kind: DisplayStateKind
    message: str | None = None

    @classmethod
    def idle(cls) -> "DisplayState":
        return cls(DisplayStateKind.IDLE)

    @classmethod
    def loading(cls) -> "DisplayState":
        return cls(DisplayStateKind.LOADING)

    @classmethod
    def success(cls) -> "DisplayState":
        return cls(DisplayStateKind.SUCCESS)

    @classmethod
    def error(cls, message: str) -> "DisplayState":
        return cls(DisplayStateKind.ERROR, message)

    @property
    def is_error(self) -> bool:
        return self.kind is DisplayStateKind.ERROR
