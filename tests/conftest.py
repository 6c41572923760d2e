import pytest
from bs4 import BeautifulSoup

BADGE_URL = "https://blzgdapipro-a.akamaihd.net/game/rank-icons/season-2/rank-5.png"
BORDER_URL = "https://blzgdapipro-a.akamaihd.net/game/playerlevelrewards/0x0250000000000924_Border.png"


def hero_section(game_type, heroes):
    """Render a career stats section; heroes is a list of (option-id, value, rows)"""
    options = ''.join(
        f'<option value="{value}" option-id="{option_id}">{option_id}</option>'
        for option_id, value, _ in heroes
    )
    panels = ''.join(
        f'<div data-group-id="stats" data-category-id="{value}"><div class="card-stat-block">'
        f'<table class="data-table"><thead><tr><th>Combat</th></tr></thead><tbody>'
        + ''.join(f'<tr><td>{label}</td><td>{text}</td></tr>' for label, text in rows)
        + '</tbody></table></div></div>'
        for _, value, rows in heroes
    )
    return (
        f'<section class="career-stats-section">'
        f'<select data-group-id="stats">{options}</select>{panels}</section>'
    )


def highlights(cards):
    return (
        '<section class="highlights-section"><ul>'
        + ''.join(
            f'<li><div class="card"><div class="card-content">'
            f'<h3 class="card-heading">{value}</h3><p class="card-copy">{label}</p></div></div></li>'
            for label, value in cards
        )
        + '</ul></section>'
    )


def achievements_section(categories):
    """categories is a list of (option-id, value, cards), cards are (title, description, disabled)"""
    options = ''.join(
        f'<option value="{value}" option-id="{option_id}">{option_id}</option>'
        for option_id, value, _ in categories
    )
    panels = ''.join(
        f'<div data-group-id="achievements" data-category-id="{value}"><ul>'
        + ''.join(
            f'<div class="column"><div class="achievement-card{" m-disabled" if disabled else ""}">'
            f'<img class="media-card-fill" src="https://example.com/{title.replace(" ", "_")}.png"/>'
            f'</div><div class="tooltip-tip"><h6 class="h5">{title}</h6><p class="h6">{description}</p></div></div>'
            for title, description, disabled in cards
        )
        + '</ul></div>'
        for _, value, cards in categories
    )
    return (
        f'<section id="achievements-section"><select data-group-id="achievements">{options}</select>'
        f'{panels}</section>'
    )


def career_page(rank=None, badge=BADGE_URL, competitive='', quickplay='', achievements=''):
    rank_block = ''
    if rank is not None:
        rank_block = f'<div class="competitive-rank"><img src="{badge}"/><div class="u-align-center h6">{rank}</div></div>'
    return f"""
    <html><body>
    <div id="overview-section">
      <div class="masthead-hero-image" data-hero-quickplay="mercy" data-hero-competitive="reinhardt"></div>
      <img class="player-portrait" src="https://example.com/portrait.png"/>
      <h1 class="header-masthead">Player</h1>
      <div class="player-level" style="background-image:url({BORDER_URL})"><div class="u-vertical-center">42</div></div>
      {rank_block}
      <div id="profile-platforms"><a href="/en-us/career/pc/us/Player-1234">PC</a></div>
    </div>
    <div id="quickplay">{quickplay}</div>
    <div id="competitive">{competitive}</div>
    {achievements}
    </body></html>
    """


QUICKPLAY_HEROES = [
    ('ALL HEROES', '0x02E00000FFFFFFFF', [('Eliminations', '1,234'), ('Time Played', '12 hours'), ('Deaths', '321')]),
    ('Mercy', '0x02E0000000000004', [('Healing Done', '45,678'), ('Time Played', '1:30:00'), ('Win Percentage', '52%')]),
    ('Soldier: 76', '0x02E000000000006E', [('Eliminations - Most in Game', '30'), ('Critical Hit Accuracy', '12.5%')]),
]

COMPETITIVE_HEROES = [
    ('ALL HEROES', '0x02E00000FFFFFFFE', [('Eliminations', '512'), ('Games Won', '40')]),
    ('Reinhardt', '0x02E0000000000007', [('Damage Blocked', '100,000'), ('Time Played', '3 hours')]),
]

ACHIEVEMENTS = [
    ('General', '0x0860000000000001', [
        ('Level 10', 'Reach level 10.', False),
        ('Level 25', 'Reach level 25.', True),
    ]),
    ('Offense', '0x0860000000000002', [
        ('Decked Out', 'Play Genji in every map.', False),
    ]),
]


@pytest.fixture
def ranked_soup():
    html = career_page(
        rank=3205,
        quickplay=highlights([('Eliminations - Average', '17.28'), ('Games Won', '120')])
        + hero_section('quickplay', QUICKPLAY_HEROES),
        competitive=highlights([('Games Won', '40')]) + hero_section('competitive', COMPETITIVE_HEROES),
        achievements=achievements_section(ACHIEVEMENTS),
    )
    return BeautifulSoup(html, 'html.parser')


@pytest.fixture
def unranked_soup():
    """Non competitive player with two heroes in quickplay and no achievements"""
    heroes = [
        ('Mercy', '0x02E0000000000004', [('Healing Done', '45,678')]),
        ('Lúcio', '0x02E0000000000079', [('Sound Barriers Provided', '12')]),
    ]
    html = career_page(quickplay=hero_section('quickplay', heroes))
    return BeautifulSoup(html, 'html.parser')


@pytest.fixture
def ranked_html(ranked_soup):
    return str(ranked_soup).encode('utf-8')
