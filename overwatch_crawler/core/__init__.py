"""
Core Overwatch Crawler Components
"""

from overwatch_crawler.core.errors import (
    ErrorKind, OverwatchError, ProfileNotFound, StructureChanged, UnclassifiedFailure, classify
)
from overwatch_crawler.core.overwatch_crawler import OverwatchCrawler
from overwatch_crawler.core.web_client import WebClient

__all__ = [
    'OverwatchCrawler',
    'WebClient',
    'ErrorKind',
    'OverwatchError',
    'ProfileNotFound',
    'StructureChanged',
    'UnclassifiedFailure',
    'classify',
]
