"""
Per-view fetch state: Idle -> Loading -> Loaded(data) | Failed(reason).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class LoadStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


_ALLOWED = {
    LoadStatus.IDLE: {LoadStatus.LOADING},
    LoadStatus.LOADING: {LoadStatus.LOADED, LoadStatus.FAILED},
    LoadStatus.LOADED: set(),
    LoadStatus.FAILED: set(),
}


class InvalidTransition(RuntimeError):
    def __init__(self, current: LoadStatus, target: LoadStatus) -> None:
        super().__init__(f"Cannot move load state from {current.value} to {target.value}")
        self.current = current
        self.target = target


@dataclass
class LoadState(Generic[T]):
    status: LoadStatus = LoadStatus.IDLE
    data: Optional[T] = None
    reason: Optional[str] = None

    @property
    def is_idle(self) -> bool:
        return self.status is LoadStatus.IDLE

    @property
    def is_loading(self) -> bool:
        return self.status is LoadStatus.LOADING

    @property
    def is_loaded(self) -> bool:
        return self.status is LoadStatus.LOADED

    @property
    def is_failed(self) -> bool:
        return self.status is LoadStatus.FAILED

    def start(self) -> None:
        self._move(LoadStatus.LOADING)

    def succeed(self, data: T) -> None:
        self._move(LoadStatus.LOADED)
        self.data = data

    def fail(self, reason: str) -> None:
        self._move(LoadStatus.FAILED)
        self.reason = reason

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"status": self.status.value}
        if self.reason is not None:
            out["reason"] = self.reason
        return out

    def _move(self, target: LoadStatus) -> None:
        if target not in _ALLOWED[self.status]:
            raise InvalidTransition(self.status, target)
        self.status = target
