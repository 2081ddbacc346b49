# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 22:41:08
# @Author : Kariko Lin

from dataclasses import dataclass, field
from threading import Event
from types import TracebackType


@dataclass(eq=False)
class Flight[V]:
    """One load episode of one key. Waiters block on `done`.

    Exactly one of `value` / `error` is meaningful once `done` is set.
    """
    done: Event = field(default_factory=Event)
    value: V | None = None
    error: BaseException | None = None
    # as raised by the loader; every waiter re-raises from here.
    _tb: TracebackType | None = field(default=None, repr=False)

    def land(self, value: V | None, error: BaseException | None) -> None:
        self.value, self.error = value, error
        if error is not None:
            self._tb = error.__traceback__
        self.done.set()

    def outcome(self) -> V:
        self.done.wait()
        if self.error is not None:
            raise self.error.with_traceback(self._tb)
        return self.value  # type: ignore[return-value]


@dataclass(eq=False)
class CacheEntry[V]:
    # absent until the first successful load
    value: V | None = None
    populated: bool = False
    stamp: float = 0.0
    flight: Flight[V] | None = None

    def expired(self, now: float, ttl: float | None) -> bool:
        return ttl is not None and now - self.stamp >= ttl

    def fresh(self, now: float, ttl: float | None) -> bool:
        return self.populated and not self.expired(now, ttl)
