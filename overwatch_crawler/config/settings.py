"""
Overwatch Crawler Configuration Settings
"""

# Network settings
DEFAULT_DELAY_RANGE = (0, 0)  # No polite delay by default, a single profile is two requests at most
REQUEST_TIMEOUT = 15

# User Agent
DEFAULT_USER_AGENT = 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36'

# Headers
DEFAULT_HEADERS = {
    'User-Agent': DEFAULT_USER_AGENT,
    'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,application/json;q=0.9,*/*;q=0.8',
    'Accept-Language': 'en-US,en;q=0.5',
    'Accept-Encoding': 'gzip, deflate',
    'Connection': 'keep-alive',
}

# playoverwatch.com URLs
PROFILE_BASE_URL = "https://playoverwatch.com/en-us/career/"
SEARCH_BASE_URL = "https://playoverwatch.com/en-us/search/account-by-name/"

# Game modes with separate stat sections, in page order
GAME_TYPES = ['competitive', 'quickplay']

PLATFORMS = {
    'XboxLive': 'xbl',
    'Playstation': 'psn',
    'PC': 'pc',
}

# Synthetic hero entry holding the aggregate across all heroes
ALL_HEROES_KEY = 'all_heroes'

# Class token marking an achievement card as locked
DISABLED_ACHIEVEMENT_CLASS = 'm-disabled'

# Data export settings
DEFAULT_DATA_DIR = 'data'
DEFAULT_SEARCH_CSV_FIELDS = [
    "name", "platform", "region", "tier", "level", "careerLink", "portrait"
]

# Logging
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
