"""
Data Extractors for Overwatch Career Pages
"""

from overwatch_crawler.extractors.profile_extractor import ProfileExtractor
from overwatch_crawler.extractors.featured_stats_extractor import FeaturedStatsExtractor
from overwatch_crawler.extractors.hero_stats_extractor import CategoryRef, HeroStatsExtractor
from overwatch_crawler.extractors.achievements_extractor import AchievementsExtractor
from overwatch_crawler.extractors.search_normalizer import SearchNormalizer

__all__ = [
    'ProfileExtractor',
    'FeaturedStatsExtractor',
    'CategoryRef',
    'HeroStatsExtractor',
    'AchievementsExtractor',
    'SearchNormalizer',
]
