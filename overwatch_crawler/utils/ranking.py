"""
Reference data for competitive ranks and level borders
"""

import logging
import re
from typing import Dict, Optional

# Season id -> rank bracket -> label. Badge images are numbered from 1.
RANKS: Dict[int, Dict[int, str]] = {
    1: {},  # Season 1 only had numeric skill ratings
    2: {
        1: 'Bronze',
        2: 'Silver',
        3: 'Gold',
        4: 'Platinum',
        5: 'Diamond',
        6: 'Master',
        7: 'Grandmaster',
        8: 'Top500',
    },
}

# Player level border image id -> tier label
TIERS: Dict[str, str] = {
    '0x0250000000000918': 'Bronze',
    '0x0250000000000919': 'Bronze',
    '0x025000000000091A': 'Bronze',
    '0x025000000000091B': 'Bronze',
    '0x025000000000091C': 'Bronze',
    '0x025000000000091D': 'Bronze',
    '0x025000000000091E': 'Silver',
    '0x025000000000091F': 'Silver',
    '0x0250000000000920': 'Silver',
    '0x0250000000000921': 'Silver',
    '0x0250000000000922': 'Silver',
    '0x0250000000000923': 'Silver',
    '0x0250000000000924': 'Gold',
    '0x0250000000000925': 'Gold',
    '0x0250000000000926': 'Gold',
    '0x0250000000000927': 'Gold',
    '0x0250000000000928': 'Gold',
    '0x0250000000000929': 'Gold',
    '0x025000000000092A': 'Platinum',
    '0x025000000000092B': 'Platinum',
    '0x025000000000092C': 'Platinum',
    '0x025000000000092D': 'Platinum',
    '0x025000000000092E': 'Platinum',
    '0x025000000000092F': 'Platinum',
    '0x0250000000000930': 'Diamond',
    '0x0250000000000931': 'Diamond',
    '0x0250000000000932': 'Diamond',
    '0x0250000000000933': 'Diamond',
    '0x0250000000000934': 'Diamond',
    '0x0250000000000935': 'Diamond',
}

_SEASON_PATTERN = re.compile(r'season-(\d+)/rank-(\d+)')
_BORDER_PATTERN = re.compile(r'playerlevelrewards/(.*?)_Border\.png')


def parse_season(url: Optional[str]) -> Dict[str, int]:
    """
    Extract the season id and rank bracket from a rank badge URL.

    Args:
        url: Badge image URL, e.g. ".../rank-icons/season-2/rank-5.png"

    Returns:
        dict: {'id': season, 'rank': bracket}, or an empty dict when the URL doesn't match
    """
    if not url:
        return {}

    match = _SEASON_PATTERN.search(url)
    if not match:
        return {}

    return {'id': int(match.group(1)), 'rank': int(match.group(2))}


def parse_tiers(img: Optional[str]) -> str:
    """Map a level border image URL to its tier label, '' when unknown"""
    if not img:
        return ''

    match = _BORDER_PATTERN.search(img)
    if not match:
        return ''

    return TIERS.get(match.group(1), '')


def resolve_ranking(season: Optional[Dict[str, int]]) -> str:
    """Look up the rank label for a parsed season, '' when it can't be resolved"""
    if not season:
        return ''

    season_id, bracket = season.get('id'), season.get('rank')
    if season_id not in RANKS:
        logging.warning(f"No rank labels for season {season_id}, reference data may be stale")
        return ''

    return RANKS[season_id].get(bracket, '')
