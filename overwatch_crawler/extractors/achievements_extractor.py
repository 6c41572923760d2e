"""
Achievements Extractor for Overwatch career pages
"""

import logging
from typing import Any, Dict, List
from bs4 import BeautifulSoup

from overwatch_crawler.config.settings import DISABLED_ACHIEVEMENT_CLASS
from overwatch_crawler.extractors.hero_stats_extractor import CategoryRef
from overwatch_crawler.utils.text import sanitize

class AchievementsExtractor:
    """Extracts achievement cards grouped by the achievements dropdown"""

    @staticmethod
    def discover(soup: BeautifulSoup) -> List[CategoryRef]:
        """List the achievement categories offered by the category selector"""
        refs = []
        for option in soup.select('select[data-group-id="achievements"] option'):
            option_id = option.get('option-id')
            value = option.get('value')
            if option_id is None or value is None:
                continue
            refs.append(CategoryRef(sanitize(option_id.lower()), value))
        return refs

    @staticmethod
    def extract_category(soup: BeautifulSoup, ref: CategoryRef) -> List[Dict[str, Any]]:
        """
        Extract the achievement cards of one category.

        A card is acquired unless it carries the disabled class.

        Args:
            soup: Parsed career page
            ref: Category discovered by discover()

        Returns:
            list: Achievement dicts tagged with the category name
        """
        achievements = []
        for container in soup.select(f'[data-category-id="{ref.value}"] > ul > div'):
            card = container.select_one('.achievement-card')
            thumbnail = container.select_one('.media-card-fill')
            title = container.select_one('.tooltip-tip > .h5')
            description = container.select_one('.tooltip-tip > .h6')

            achievements.append({
                'acquired': card is not None and DISABLED_ACHIEVEMENT_CLASS not in card.get('class', []),
                'thumbnail': thumbnail.get('src') if thumbnail else None,
                'title': title.get_text(strip=True) if title else '',
                'description': description.get_text(strip=True) if description else '',
                'category': ref.name,
            })
        return achievements

    @staticmethod
    def extract(soup: BeautifulSoup) -> List[Dict[str, Any]]:
        """Extract all achievements as one flat list, in category order"""
        achievements = []
        for ref in AchievementsExtractor.discover(soup):
            achievements.extend(AchievementsExtractor.extract_category(soup, ref))

        logging.debug(f"Extracted {len(achievements)} achievements")
        return achievements
