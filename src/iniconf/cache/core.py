# -*- encoding: utf-8 -*-
# @File   : core.py
# @Time   : 2024/10/12 22:40:51
# @Author : Kariko Lin

"""Lazily populated, thread safe cache with per-key single-flight loads.

`get()` holds the table lock only to look at or update entries;
the loader itself runs unlocked, in the thread that found the key
missing (or stale) first. Every other thread asking for that key
while the load runs waits on the same `Flight` and gets the same
value, or the same exception.

Failures are never remembered: the entry is dropped and the next
`get()` starts a new load.
"""

import logging
import time
import warnings
from threading import Lock
from typing import Callable, Hashable, Iterator

from ..errors import CacheClosed
from .model import CacheEntry, Flight


class LoadingCache[K: Hashable, V]:
    def __init__(
        self,
        loader: Callable[[K], V], *,
        ttl: float | None = None,
        clock: Callable[[], float] = time.monotonic
    ) -> None:
        """`ttl` in seconds; `None` keeps values until `close()`."""
        if ttl is not None and not ttl > 0:
            raise ValueError('ttl must be greater than 0')
        self._loader = loader
        self._ttl = ttl
        self._clock = clock
        self._lock = Lock()
        self._entries: dict[K, CacheEntry[V]] = {}
        self._closed = False

    @property
    def ttl(self) -> float | None:
        return self._ttl

    @property
    def closed(self) -> bool:
        return self._closed

    def get(self, key: K) -> V:
        with self._lock:
            if self._closed:
                raise CacheClosed()
            entry = self._entries.get(key)
            if entry is None:
                entry = self._entries[key] = CacheEntry()
            elif entry.fresh(self._clock(), self._ttl):
                return entry.value  # type: ignore[return-value]
            if (flight := entry.flight) is not None:
                leader = False
            else:
                if entry.populated:
                    logging.debug(f'cache: {key!r} expired')
                flight = entry.flight = Flight()
                leader = True

        if not leader:
            return flight.outcome()
        return self.__load(key, entry, flight)

    def __load(self, key: K, entry: CacheEntry[V], flight: Flight[V]) -> V:
        logging.debug(f'cache: loading {key!r}')
        try:
            value = self._loader(key)
        except BaseException as e:
            with self._lock:
                entry.flight = None
                # stale values must not outlive a failed refresh either.
                if self._entries.get(key) is entry:
                    del self._entries[key]
            logging.debug(f'cache: loading {key!r} failed: {e}')
            flight.land(None, e)
            raise

        with self._lock:
            entry.flight = None
            # deleted or closed meanwhile: hand out, but don't keep.
            if not self._closed and self._entries.get(key) is entry:
                entry.value, entry.populated = value, True
                entry.stamp = self._clock()
        logging.debug(f'cache: loaded {key!r}')
        flight.land(value, None)
        return value

    def delete(self, key: K) -> bool:
        """Forget `key`. The next `get()` reloads it."""
        with self._lock:
            return self._entries.pop(key, None) is not None

    def keys(self) -> list[K]:
        """Keys holding a value that is still fresh."""
        with self._lock:
            now = self._clock()
            return [k for k, e in self._entries.items()
                    if e.fresh(now, self._ttl)]

    def gc(self) -> int:
        """Evict expired entries now instead of on their next access."""
        if self._ttl is None:
            return 0
        with self._lock:
            now = self._clock()
            stale = [k for k, e in self._entries.items()
                     if e.populated and e.flight is None
                     and e.expired(now, self._ttl)]
            for k in stale:
                del self._entries[k]
        if stale:
            logging.debug(f'cache: evicted {len(stale)} expired entries')
        return len(stale)

    def close(self) -> None:
        with self._lock:
            if self._closed:
                warnings.warn('cache closed twice', stacklevel=2)
                return
            self._closed = True
            self._entries.clear()
        logging.debug('cache: closed')

    def __enter__(self) -> 'LoadingCache[K, V]':
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self.keys())
