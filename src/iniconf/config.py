# -*- encoding: utf-8 -*-
# @File   : config.py
# @Time   : 2024/10/12 23:31:02
# @Author : Kariko Lin

"""Entry point: cached, per-section access to one INI file.

    ```python
    with ConfigStore('app.ini', ttl=30) as conf:
        db = conf.section('Database')
        host = db.get('host', 'localhost')
        debug = conf.section(DEFAULT_SECTION).getbool('debug')
    ```

Sections are loaded on first use and kept until `ttl` seconds have
passed (or forever, without `ttl`). Each load reads the whole file again.
"""

import time
from dataclasses import dataclass, field
from datetime import timedelta
from numbers import Real
from os import PathLike, fspath
from typing import Callable

from .cache import LoadingCache
from .errors import CacheClosed, ConstructionError
from .ini import IniSection
from .loader import SectionLoader


@dataclass(frozen=True, kw_only=True)
class ConfigOptions:
    # seconds or timedelta, strictly positive. None: never expire.
    ttl: float | timedelta | None = None
    encoding: str = 'utf-8-sig'
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)

    def __post_init__(self) -> None:
        ttl = self.ttl
        if isinstance(ttl, timedelta):
            ttl = ttl.total_seconds()
        if ttl is not None:
            if isinstance(ttl, bool) or not isinstance(ttl, Real):
                raise ConstructionError(
                    f'ttl must be a number of seconds or timedelta, '
                    f'not {type(self.ttl).__name__}')
            if not ttl > 0:
                raise ConstructionError('ttl must be greater than 0')
            ttl = float(ttl)
        # frozen, normalize in place.
        object.__setattr__(self, 'ttl', ttl)
        if not self.encoding:
            raise ConstructionError('encoding must not be empty')
        if not callable(self.clock):
            raise ConstructionError('clock must be callable')

    @property
    def ttl_seconds(self) -> float | None:
        return self.ttl  # type: ignore[return-value]


class ConfigStore:
    def __init__(
        self,
        pathname: str | PathLike[str],
        options: ConfigOptions | None = None,
        **overrides
    ) -> None:
        if options is not None and overrides:
            raise ConstructionError(
                'pass either options or keyword overrides, not both')
        if not fspath(pathname):
            raise ConstructionError('pathname must not be empty')
        if options is None:
            try:
                options = ConfigOptions(**overrides)
            except TypeError as e:
                raise ConstructionError(str(e)) from e
        self._pathname = fspath(pathname)
        self._options = options
        self._loader = SectionLoader(self._pathname, options.encoding)
        self._cache: LoadingCache[str, IniSection] = LoadingCache(
            self._loader.load,
            ttl=options.ttl_seconds,
            clock=options.clock)

    @property
    def pathname(self) -> str:
        return self._pathname

    @property
    def options(self) -> ConfigOptions:
        return self._options

    @property
    def closed(self) -> bool:
        return self._cache.closed

    def section(self, name: str) -> IniSection:
        """Key-value pairs of `[name]`; `DEFAULT_SECTION` for the header.

        CAUTION:
            May raise `OSError`, `IniParseError`, `SectionNotFound`
            and `CacheClosed`.
        """
        try:
            return self._cache.get(name)
        except CacheClosed:
            raise CacheClosed(f'config {self._pathname!r}') from None

    def invalidate(self, name: str) -> bool:
        """Drop `name` from the cache so it is read again on next use."""
        return self._cache.delete(name)

    def cached_sections(self) -> list[str]:
        return self._cache.keys()

    def close(self) -> None:
        self._cache.close()

    def __enter__(self) -> 'ConfigStore':
        return self

    def __exit__(self, *exc: object) -> None:
        if not self.closed:
            self.close()

    def __repr__(self) -> str:
        return f'ConfigStore({self._pathname!r}, {self._options!r})'
