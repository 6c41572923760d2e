from overwatch_crawler.utils.ranking import RANKS, TIERS, parse_season, parse_tiers, resolve_ranking
from overwatch_crawler.utils.urls import get_search_url, get_url

from conftest import BADGE_URL, BORDER_URL


def test_parse_season():
    assert parse_season(BADGE_URL) == {'id': 2, 'rank': 5}


def test_parse_season_multi_digit():
    assert parse_season("https://cdn/rank-icons/season-12/rank-3.png") == {'id': 12, 'rank': 3}


def test_parse_season_no_match_is_empty():
    assert parse_season("https://cdn/rank-icons/rank-5.png") == {}
    assert parse_season("") == {}
    assert parse_season(None) == {}


def test_resolve_ranking():
    assert resolve_ranking({'id': 2, 'rank': 1}) == 'Bronze'
    assert resolve_ranking({'id': 2, 'rank': 8}) == 'Top500'
    assert resolve_ranking(parse_season(BADGE_URL)) == 'Diamond'


def test_resolve_ranking_short_circuits():
    assert resolve_ranking({}) == ''
    assert resolve_ranking(None) == ''
    assert resolve_ranking({'id': 1, 'rank': 3}) == ''  # season without labels
    assert resolve_ranking({'id': 2, 'rank': 9}) == ''


def test_resolve_ranking_unknown_season_warns(caplog):
    assert resolve_ranking({'id': 7, 'rank': 2}) == ''
    assert "season 7" in caplog.text


def test_ranking_labels_only_for_known_entries():
    for season_id, labels in RANKS.items():
        for bracket, label in labels.items():
            assert resolve_ranking({'id': season_id, 'rank': bracket}) == label


def test_parse_tiers():
    assert parse_tiers(BORDER_URL) == 'Gold'
    assert parse_tiers(f"background-image:url({BORDER_URL})") == 'Gold'
    assert parse_tiers("https://cdn/playerlevelrewards/0xDEADBEEF_Border.png") == ''
    assert parse_tiers("https://cdn/portrait.png") == ''
    assert parse_tiers(None) == ''
    assert set(TIERS.values()) == {'Bronze', 'Silver', 'Gold', 'Platinum', 'Diamond'}


def test_get_url():
    assert get_url('pc', 'us', 'Player-1234') == "https://playoverwatch.com/en-us/career/pc/us/Player-1234"
    assert get_url('pc', 'eu', 'Player#1234') == "https://playoverwatch.com/en-us/career/pc/eu/Player-1234"
    assert get_url('xbl', 'us', 'Gamer') == "https://playoverwatch.com/en-us/career/xbl/Gamer"
    assert get_url('psn', None, 'Gamer') == "https://playoverwatch.com/en-us/career/psn/Gamer"


def test_get_search_url():
    assert get_search_url('Player') == "https://playoverwatch.com/en-us/search/account-by-name/Player"
