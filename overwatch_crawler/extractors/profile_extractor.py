"""
Profile Extractor for Overwatch career pages
"""

from typing import Any, Dict, Optional
from bs4 import BeautifulSoup

from overwatch_crawler.utils.ranking import parse_season, parse_tiers, resolve_ranking
from overwatch_crawler.utils.text import parse_int

class ProfileExtractor:
    """Extracts player identity, level, rank and platform from the masthead"""

    @staticmethod
    def extract_nick(soup: BeautifulSoup) -> str:
        """Extract the player nickname"""
        nick_elem = soup.select_one('.header-masthead')
        return nick_elem.get_text(strip=True) if nick_elem else ""

    @staticmethod
    def extract_level(soup: BeautifulSoup):
        """Extract the player level, NaN when missing"""
        level_elem = soup.select_one('div.player-level div')
        return parse_int(level_elem.get_text(strip=True)) if level_elem else float('nan')

    @staticmethod
    def extract_avatar(soup: BeautifulSoup) -> Optional[str]:
        """Extract the portrait image URL"""
        avatar_elem = soup.select_one('.player-portrait')
        return avatar_elem.get('src') if avatar_elem else None

    @staticmethod
    def extract_rank(soup: BeautifulSoup) -> Optional[int]:
        """Extract the competitive skill rating, None for players without a placement"""
        rank_elem = soup.select_one('div.competitive-rank > div')
        if not rank_elem:
            return None

        rank = parse_int(rank_elem.get_text(strip=True))
        # NaN and 0 both mean unranked
        return rank if rank == rank and rank else None

    @staticmethod
    def extract_rank_picture(soup: BeautifulSoup) -> Optional[str]:
        """Extract the rank badge image URL"""
        badge_elem = soup.select_one('div.competitive-rank > img')
        return badge_elem.get('src') if badge_elem else None

    @staticmethod
    def extract_tier(soup: BeautifulSoup) -> str:
        """Extract the level border tier from the player level background image"""
        level_elem = soup.select_one('.player-level')
        if not level_elem:
            return ""
        return parse_tiers(level_elem.get('style', ''))

    @staticmethod
    def extract_platform(soup: BeautifulSoup) -> str:
        """Extract the platform label"""
        platform_elems = soup.select('#profile-platforms > a')
        return ''.join(elem.get_text(strip=True) for elem in platform_elems)

    @staticmethod
    def extract_profile(soup: BeautifulSoup) -> Dict[str, Any]:
        """
        Extract the full profile block.

        Season, rank picture and ranking are only read for ranked players.

        Args:
            soup: Parsed career page

        Returns:
            dict: Profile fields (url is filled in by the crawler)
        """
        profile = {
            'nick': ProfileExtractor.extract_nick(soup),
            'level': ProfileExtractor.extract_level(soup),
            'avatar': ProfileExtractor.extract_avatar(soup),
            'rank': ProfileExtractor.extract_rank(soup),
            'tier': ProfileExtractor.extract_tier(soup),
            'rank_picture': None,
            'season': None,
            'ranking': '',
        }

        if profile['rank'] is not None:
            profile['rank_picture'] = ProfileExtractor.extract_rank_picture(soup)
            profile['season'] = parse_season(profile['rank_picture'])
            profile['ranking'] = resolve_ranking(profile['season'])

        profile['platform'] = ProfileExtractor.extract_platform(soup)

        return profile
