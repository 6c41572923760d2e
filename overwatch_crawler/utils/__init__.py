"""
Utility Functions and Classes
"""

from overwatch_crawler.utils.data_exporter import DataExporter
from overwatch_crawler.utils.logging_config import setup_logging
from overwatch_crawler.utils.ranking import RANKS, TIERS, parse_season, parse_tiers, resolve_ranking
from overwatch_crawler.utils.text import cast, sanitize, to_timestamp
from overwatch_crawler.utils.urls import get_url, get_search_url

__all__ = [
    'DataExporter',
    'setup_logging',
    'RANKS',
    'TIERS',
    'parse_season',
    'parse_tiers',
    'resolve_ranking',
    'cast',
    'sanitize',
    'to_timestamp',
    'get_url',
    'get_search_url',
]
