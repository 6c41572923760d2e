"""
Main Overwatch Crawler Class
"""

import logging
from typing import Optional, Dict, Any, List
from bs4 import BeautifulSoup

from overwatch_crawler.core.web_client import WebClient
from overwatch_crawler.extractors import (
    ProfileExtractor, FeaturedStatsExtractor, HeroStatsExtractor,
    AchievementsExtractor, SearchNormalizer
)
from overwatch_crawler.config.settings import GAME_TYPES, ALL_HEROES_KEY, DEFAULT_DELAY_RANGE
from overwatch_crawler.utils.urls import get_url, get_search_url

class OverwatchCrawler:
    """Fetches Overwatch career pages and assembles them into profile reports"""

    def __init__(self, delay_range=DEFAULT_DELAY_RANGE):
        """
        Initialize Overwatch Crawler.

        Args:
            delay_range: Min and max seconds to wait before each request
        """
        self.web_client = WebClient(delay_range)
        self.profile_extractor = ProfileExtractor()
        self.featured_extractor = FeaturedStatsExtractor()
        self.hero_extractor = HeroStatsExtractor()
        self.achievements_extractor = AchievementsExtractor()

    def get_all(self, platform: str, region: Optional[str], tag: str, overall_only: bool = False) -> Dict[str, Any]:
        """
        Crawl a career page and extract everything on it.

        Args:
            platform: 'pc', 'xbl' or 'psn'
            region: Region code, only used for PC
            tag: Player tag
            overall_only: Skip individual hero tables

        Returns:
            dict: Report with profile, competitive, quickplay and achievements

        Raises:
            OverwatchError: when the page can't be fetched
        """
        url = get_url(platform, region, tag)
        logging.info(f"Crawling Overwatch profile {tag}: {url}")

        response = self.web_client.get_page(url)
        soup = BeautifulSoup(response.content, 'html.parser')

        return self.parse_document(soup, url, overall_only)

    def get_overall(self, platform: str, region: Optional[str], tag: str) -> Dict[str, Any]:
        """Crawl a career page keeping only the all heroes aggregate"""
        return self.get_all(platform, region, tag, overall_only=True)

    def search(self, nickname: str) -> List[Dict[str, Any]]:
        """
        Search accounts by nickname.

        Returns:
            list: Search records with platform, region, tier and level filled in
        """
        url = get_search_url(nickname)
        logging.info(f"Searching Overwatch accounts for {nickname}: {url}")

        players = self.web_client.get_json(url)
        if not isinstance(players, list):
            logging.warning(f"Unexpected search payload for {nickname}: {type(players).__name__}")
            return []

        return SearchNormalizer.normalize(players)

    def parse_document(self, soup: BeautifulSoup, url: str = '', overall_only: bool = False) -> Dict[str, Any]:
        """
        Assemble a report from an already parsed career page.

        Each part reads its own region of the page, so the order they run in
        doesn't change the result.
        """
        profile = self.profile_extractor.extract_profile(soup)
        profile['url'] = url

        report = {'profile': profile}
        for game_type in GAME_TYPES:
            report[game_type] = self._extract_game_mode(soup, game_type, overall_only)

        report['achievements'] = self.achievements_extractor.extract(soup)

        hero_counts = ', '.join(f"{game_type}: {len(report[game_type]['heroes'])}" for game_type in GAME_TYPES)
        logging.info(f"Extracted profile {profile['nick'] or '?'} (heroes {hero_counts}, "
                     f"achievements: {len(report['achievements'])})")
        return report

    def _extract_game_mode(self, soup: BeautifulSoup, game_type: str, overall_only: bool) -> Dict[str, Any]:
        """Extract featured and hero stats, folding the all heroes table into global"""
        global_stats = self.featured_extractor.extract(soup, game_type)
        heroes = self.hero_extractor.extract(soup, game_type, overall_only)
        global_stats.update(heroes.pop(ALL_HEROES_KEY, {}))

        return {
            'global': global_stats,
            'heroes': heroes,
            'mastering_hero': self.featured_extractor.extract_mastering_hero(soup, game_type),
        }

    def close(self):
        """Close the crawler and cleanup resources"""
        self.web_client.close()
