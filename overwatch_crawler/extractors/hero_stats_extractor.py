"""
Hero Stats Extractor for Overwatch career pages

Hero tables share the same markup in every game mode and are only told apart
by their category id, so the hero roster is read from the hero dropdown first
and each table is looked up afterwards.
"""

import logging
from typing import Dict, List, NamedTuple, Optional
from bs4 import BeautifulSoup

from overwatch_crawler.utils.text import Number, cast, sanitize


class CategoryRef(NamedTuple):
    """Dropdown option linking a display name to its data panel"""
    name: str
    value: str


class HeroStatsExtractor:
    """Extracts per hero stat tables for a game mode"""

    @staticmethod
    def discover(soup: BeautifulSoup, game_type: str, limit: Optional[int] = None) -> List[CategoryRef]:
        """
        List the heroes offered by the hero selector of a game mode.

        Args:
            soup: Parsed career page
            game_type: 'competitive' or 'quickplay'
            limit: Stop after this many heroes (1 keeps only "All Heroes")

        Returns:
            list: CategoryRef per hero, in dropdown order
        """
        refs = []
        for option in soup.select(f'#{game_type} > .career-stats-section option'):
            if limit is not None and len(refs) >= limit:
                break
            option_id = option.get('option-id')
            value = option.get('value')
            if option_id is None or value is None:
                continue
            refs.append(CategoryRef(sanitize(option_id.lower()), value))
        return refs

    @staticmethod
    def extract_hero(soup: BeautifulSoup, game_type: str, ref: CategoryRef) -> Dict[str, Number]:
        """Read every stat row of the panels tagged with the hero's category id"""
        stats = {}
        for panel in soup.select(f'#{game_type} [data-category-id="{ref.value}"]'):
            for row in panel.select('tbody > tr'):
                cells = row.find_all('td')
                if len(cells) < 2:
                    continue
                stats[sanitize(cells[0].get_text())] = cast(cells[1].get_text())
        return stats

    @staticmethod
    def extract(soup: BeautifulSoup, game_type: str, overall_only: bool = False) -> Dict[str, Dict[str, Number]]:
        """
        Extract stat tables for the heroes of a game mode.

        Args:
            soup: Parsed career page
            game_type: 'competitive' or 'quickplay'
            overall_only: Only extract the "All Heroes" aggregate

        Returns:
            dict: Hero name -> stat name -> value
        """
        refs = HeroStatsExtractor.discover(soup, game_type, limit=1 if overall_only else None)

        heroes = {}
        for ref in refs:
            heroes[ref.name] = HeroStatsExtractor.extract_hero(soup, game_type, ref)

        logging.debug(f"Extracted {len(heroes)} hero tables for {game_type}")
        return heroes
