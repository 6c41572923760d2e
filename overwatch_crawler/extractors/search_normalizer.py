"""
Search result normalization
"""

from typing import Any, Dict, List

class SearchNormalizer:
    """Derives platform, region, tier and level fields for search results"""

    @staticmethod
    def normalize_player(player: Dict[str, Any]) -> Dict[str, Any]:
        """
        Add derived fields to one search record, in place.

        careerLink looks like "/pc/us/Name-1234" and level packs the
        prestige tier in its hundreds.
        """
        segments = (player.get('careerLink') or '').split('/')
        player['platform'] = segments[1] if len(segments) > 1 else ''
        player['region'] = segments[2] if len(segments) > 2 else ''

        level = int(player.get('level') or 0)
        player['tier'] = level // 100
        player['level'] = level % 100
        return player

    @staticmethod
    def normalize(players: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Normalize every record of a decoded search response, in place"""
        for player in players:
            SearchNormalizer.normalize_player(player)
        return players
