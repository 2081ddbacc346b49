# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 22:40:12
# @Author : Kariko Lin

from .core import LoadingCache
from .model import CacheEntry, Flight

__all__ = ['LoadingCache', 'CacheEntry', 'Flight']
