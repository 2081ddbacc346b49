# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 23:40:26
# @Author : Kariko Lin

import logging

from .cache import LoadingCache
from .config import ConfigOptions, ConfigStore
from .errors import (
    CacheClosed,
    ConfigError,
    ConstructionError,
    IniParseError,
    SectionNotFound
)
from .ini import DEFAULT_SECTION, IniParser, IniSection, SectionTable
from .loader import SectionLoader

__all__ = [
    'ConfigStore', 'ConfigOptions', 'DEFAULT_SECTION',
    'IniSection', 'SectionTable', 'IniParser', 'SectionLoader',
    'LoadingCache',
    'ConfigError', 'ConstructionError', 'IniParseError',
    'SectionNotFound', 'CacheClosed'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
