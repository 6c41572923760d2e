"""
Featured Stats Extractor for Overwatch career pages
"""

from typing import Dict, Optional
from bs4 import BeautifulSoup

from overwatch_crawler.utils.text import Number, cast, sanitize

class FeaturedStatsExtractor:
    """Extracts the headline stat cards and the mastered hero of a game mode"""

    @staticmethod
    def extract(soup: BeautifulSoup, game_type: str) -> Dict[str, Number]:
        """
        Extract the highlight cards of one game mode section.

        Args:
            soup: Parsed career page
            game_type: 'competitive' or 'quickplay'

        Returns:
            dict: Sanitized card label -> cast value
        """
        stats = {}
        for card in soup.select(f'#{game_type} > section.highlights-section div.card-content'):
            label = card.select_one('.card-copy')
            value = card.select_one('.card-heading')
            if not label:
                continue
            stats[sanitize(label.get_text())] = cast(value.get_text() if value else '')
        return stats

    @staticmethod
    def extract_mastering_hero(soup: BeautifulSoup, game_type: str) -> Optional[str]:
        """Extract the hero shown in the masthead for a game mode"""
        hero_image = soup.select_one('#overview-section > .masthead-hero-image')
        return hero_image.get(f'data-hero-{game_type}') if hero_image else None
