# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 21:03:17
# @Author : Kariko Lin

"""Exceptions raised by `iniconf`.

I/O failures are NOT wrapped: whatever `open()` raises
(`FileNotFoundError`, `PermissionError`, ...) reaches the caller as is.
"""


class ConfigError(Exception):
    """Base of every error this package raises on its own."""
    pass


class ConstructionError(ConfigError, ValueError):
    """Invalid options handed to `ConfigOptions` or `ConfigStore`."""
    pass


class IniParseError(ConfigError, ValueError):
    """A line that is neither blank, a header, nor a `key = value` pair.

    `lineno` is 1-based; 0 means the file could not be decoded at all.
    """
    def __init__(
        self, line: str, lineno: int = 0, source: str | None = None
    ) -> None:
        self.line = line
        self.lineno = lineno
        self.source = source
        super().__init__(line, lineno, source)

    def __str__(self) -> str:
        where = ''
        if self.source is not None:
            where = f'{self.source}:{self.lineno}: '
        elif self.lineno:
            where = f'line {self.lineno}: '
        if self.lineno == 0:
            return f'{where}undecodable config file: {self.line}'
        return f'{where}invalid config line: [{self.line}]'


class SectionNotFound(ConfigError, KeyError):
    def __init__(self, section: str) -> None:
        self.section = section
        super().__init__(section)

    # KeyError would repr() the args otherwise.
    def __str__(self) -> str:
        return f'no such section: {self.section!r}'


class CacheClosed(ConfigError, RuntimeError):
    def __init__(self, what: str = 'cache') -> None:
        super().__init__(f'{what} is closed')
