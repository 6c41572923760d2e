from unittest import mock

import requests

from overwatch_crawler.examples import crawl_profile


def test_profile_command(tmp_path, ranked_html, capsys):
    response = mock.Mock(status_code=200, content=ranked_html)
    with mock.patch.object(requests.Session, 'get', return_value=response):
        code = crawl_profile.main(['--output', str(tmp_path), 'profile', 'pc', 'Player-1234'])

    out = capsys.readouterr().out
    assert code == 0
    assert 'Player: Player (level 42, PC)' in out
    assert 'Competitive: 3205 Diamond' in out
    assert 'Achievements: 2/3' in out
    assert (tmp_path / 'overwatch_profile_Player.json').exists()


def test_profile_command_not_found(tmp_path, capsys):
    with mock.patch.object(requests.Session, 'get', return_value=mock.Mock(status_code=404)):
        code = crawl_profile.main(['--output', str(tmp_path), 'profile', 'xbl', 'Nobody'])

    assert code == 1
    assert 'PROFILE_NOT_FOUND' in capsys.readouterr().out


def test_search_command(tmp_path, capsys):
    response = mock.Mock(status_code=200)
    response.json.return_value = [{'name': 'Player#1234', 'careerLink': '/pc/eu/Player-1234', 'level': 205}]
    with mock.patch.object(requests.Session, 'get', return_value=response):
        code = crawl_profile.main(['--output', str(tmp_path), 'search', 'Player'])

    assert code == 0
    assert 'Player#1234: pc/eu tier 2 level 5' in capsys.readouterr().out
    assert (tmp_path / 'overwatch_search_results.csv').exists()
