# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45
# @Author : Kariko Lin

"""Line oriented reader of plain INI text.

Rules, applied to each line in order:

1. Everything from the first `;` on is a comment. There is no quoting,
   so a `;` inside a value cuts it too.
2. Blank lines (after trimming) are skipped.
3. `[name]` starts a section. The name is everything between the brackets
   and may not be empty or contain `]`. A header with no pairs under it
   yields no section at all. A repeated header reopens the earlier one.
4. `key = value` splits on the first `=`. Both sides are trimmed and both
   must be non-empty. A later key overwrites an earlier one in the same
   section.
5. Anything else aborts the whole parse with `IniParseError`.

Pairs before the first header go to `DEFAULT_SECTION`.
"""

import logging
from io import StringIO, TextIOBase
from os import PathLike
from re import compile as regex

from chardet import detect as guess_codec

from ..abstract import FileHandler
from ..errors import IniParseError
from .model import DEFAULT_SECTION, IniSection, SectionTable

COMMENT = ';'

_SECTION_RE = regex(r'^\[([^\]]+)\]$')
_PAIR_RE = regex(r'^([^=]+)=(.+)$')


class IniParser(FileHandler[SectionTable]):
    def __init__(
        self, rootfile: str | PathLike[str], encoding: str = 'utf-8-sig'
    ) -> None:
        super().__init__(rootfile)
        self._codec = encoding

    @staticmethod
    def readstream(
        buf: TextIOBase, source: str | None = None
    ) -> SectionTable:
        """读取解码好的字符串流。

        如没有特殊需求，直接调用`self.read()`便是。
        """
        sections: dict[str, dict[str, str]] = {DEFAULT_SECTION: {}}
        this_name = DEFAULT_SECTION
        lineno = 0
        while i := buf.readline():
            lineno += 1
            if (cut := i.find(COMMENT)) >= 0:
                i = i[:cut]
            i = i.strip()
            if not i:
                continue
            if md := _SECTION_RE.match(i):
                name = md[1]
                if name in sections and name != DEFAULT_SECTION:
                    logging.debug(
                        f'{source or "<stream>"}:{lineno}: '
                        f'section [{name}] reopened')
                this_name = name
            elif md := _PAIR_RE.match(i):
                # sections come into being with their first pair.
                sections.setdefault(this_name, {})[md[1].strip()] = \
                    md[2].strip()
            else:
                raise IniParseError(i, lineno, source)
        return SectionTable(
            {k: IniSection(k, v) for k, v in sections.items()})

    def decode(self, raw: bytes) -> str:
        try:
            return raw.decode(self._codec)
        except UnicodeDecodeError as e:
            codec = guess_codec(raw)
            # fallbacks
            if not codec or not codec['encoding'] \
                    or (codec['confidence'] or 0) < 0.8:
                raise IniParseError(str(e), 0, self._fn) from e
            logging.debug(
                f'{self._fn}: not {self._codec}, '
                f'guessed {codec["encoding"]} ({codec["confidence"]:.2f})')
            try:
                return raw.decode(codec['encoding'])
            except (UnicodeDecodeError, LookupError) as e2:
                raise IniParseError(str(e2), 0, self._fn) from e2

    def parse(self, raw: bytes) -> SectionTable:
        """Decode and parse file content. Pure, no I/O."""
        return self.readstream(StringIO(self.decode(raw)), self._fn)

    def read(self) -> SectionTable:
        """读取`IniParser`实例指定的文件。

        CAUTION:
            May raise `OSError` and `IniParseError`.
        """
        return self.parse(self.read_bytes())

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
