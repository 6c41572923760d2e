"""
Overwatch Crawler - career profile and account search extraction

This package fetches playoverwatch.com career pages and turns them into
plain dictionaries: profile, per game mode stats, hero stats and achievements.
"""

from .core import OverwatchCrawler, WebClient, OverwatchError, ProfileNotFound, StructureChanged, UnclassifiedFailure
from .utils import DataExporter, setup_logging

__version__ = "1.0.0"

__all__ = [
    'OverwatchCrawler',
    'WebClient',
    'OverwatchError',
    'ProfileNotFound',
    'StructureChanged',
    'UnclassifiedFailure',
    'DataExporter',
    'setup_logging'
]
