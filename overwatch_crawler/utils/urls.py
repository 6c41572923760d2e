"""
URL builders for playoverwatch.com
"""

from typing import Optional

from overwatch_crawler.config.settings import PROFILE_BASE_URL, SEARCH_BASE_URL, PLATFORMS


def get_url(platform: str, region: Optional[str], tag: str) -> str:
    """
    Build the career profile URL for a player.

    Args:
        platform: 'pc', 'xbl' or 'psn'
        region: Region code ('us', 'eu', 'kr'), only used for PC
        tag: Player tag, battletags may use '#' or '-'

    Returns:
        str: Profile URL
    """
    # Only PC profiles are split by region
    region_part = f"/{region}" if platform == PLATFORMS['PC'] and region else ""
    return f"{PROFILE_BASE_URL}{platform}{region_part}/{tag.replace('#', '-')}"


def get_search_url(nickname: str) -> str:
    """Build the account search URL for a nickname"""
    return f"{SEARCH_BASE_URL}{nickname}"
