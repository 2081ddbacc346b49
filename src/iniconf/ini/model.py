# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10
# @Author : Kariko Lin

"""
Plain INI structure: a default section plus `[name]` blocks of
`key = value` pairs. No inheritance, no `[#include]`.

Both classes are read-only once the parser hands them out,
since the same instance may be shared by many threads through the cache.
"""

from collections.abc import Mapping
from typing import Callable, Iterable, Iterator

DEFAULT_SECTION = 'General'
"""Holds the pairs written before any `[name]` header."""


class IniSection(Mapping[str, str]):
    """INI 小节字典（只读）。

    The dict given to `__init__` is copied, so nothing outside
    may change the section afterwards. Use `to_dict()` for a mutable copy.
    """
    __slots__ = ('_name', '_data')

    def __init__(
        self, section_name: str, /,
        pairs: Mapping[str, str] | Iterable[tuple[str, str]] = ()
    ) -> None:
        self._name = section_name
        self._data: dict[str, str] = dict(pairs)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()

    def get(
        self, key: str, default: object = None,
        converter: Callable[[str], object] = str
    ) -> object:
        if converter is list:
            return self.getlist(key)
        elif converter is bool:
            return self.getbool(key)
        elif key not in self._data:
            return default
        else:
            return converter(self._data[key])

    # lazy to implement auto converter. just manual.
    def getbool(self, key: str) -> bool | None:
        if key not in self._data:
            return None
        val = self._data[key]
        return bool(val) and val[0].lower() in ('1', 'y', 't')

    def getlist(self, key: str) -> tuple[str, ...]:
        if key not in self._data:
            return ()
        return tuple(i.strip() for i in self._data[key].split(','))


class SectionTable(Mapping[str, IniSection]):
    """A whole parsed file. `DEFAULT_SECTION` is always there."""
    def __init__(
        self, sections: Mapping[str, IniSection] | None = None
    ) -> None:
        self.__raw: dict[str, IniSection] = dict(sections or {})
        self.__raw.setdefault(
            DEFAULT_SECTION, IniSection(DEFAULT_SECTION))

    @property
    def header(self) -> IniSection:
        """位于文件头部的，不属于任何小节的游离键值对。"""
        return self.__raw[DEFAULT_SECTION]

    def __getitem__(self, key: str) -> IniSection:
        return self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __repr__(self) -> str:
        return f'SectionTable({list(self.__raw)!r})'
