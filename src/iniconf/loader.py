# -*- encoding: utf-8 -*-
# @File   : loader.py
# @Time   : 2024/10/12 23:15:40
# @Author : Kariko Lin

from os import PathLike

from .abstract import FileHandler
from .errors import SectionNotFound
from .ini import IniParser, IniSection, SectionTable


class SectionLoader(FileHandler[SectionTable]):
    """Re-reads and re-parses the whole file on every call.

    Never touches any cache; `LoadingCache` decides when to call it.
    """
    def __init__(
        self, rootfile: str | PathLike[str], encoding: str = 'utf-8-sig'
    ) -> None:
        super().__init__(rootfile)
        self._parser = IniParser(rootfile, encoding)

    def read(self) -> SectionTable:
        return self._parser.parse(self.read_bytes())

    def load(self, section: str) -> IniSection:
        """CAUTION:
            May raise `OSError`, `IniParseError` and `SectionNotFound`.
        """
        table = self.read()
        if section not in table:
            raise SectionNotFound(section)
        return table[section]
