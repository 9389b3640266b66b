"""Global pytest fixtures.

Centralizes:
 - Project root path insertion (so individual tests don't repeat sys.path hacks)
 - Reusable HTML snippets for the player info and market pages
 - Small HTML builders for event rows and event markers
"""

import sys
from pathlib import Path

import pytest

# Ensure project root (containing fantasy_scraper/) is on sys.path once
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


# -------------------- Builders -------------------- #

def _team_block(name, goals):
    img = f'<img src="/crest.png" alt="{name}"/>' if name is not None else '<img src="/crest.png"/>'
    return f'<div class="css-wpwytb">{img}<p>{goals}</p></div>'


def build_event_row(
    matchday="J15",
    teams=(("Real Betis", 3), ("FC Barcelona", 5)),
    events="",
    starter=True,
    minutes="90",
    laliga="12",
    bonus="1,5",
):
    """Render one fantasy events row in the page's markup shape."""
    blocks = "".join(_team_block(name, goals) for name, goals in teams)
    flag_fill = "#00D26A" if starter else "#9CA3AF"
    matchday_html = f'<div class="css-1i4ugup"><p>{matchday}</p></div>' if matchday is not None else ""
    return (
        '<div class="MuiBox-root css-2p80or">'
        f"{matchday_html}"
        f'<div class="css-12zt0v">{blocks}</div>'
        f'<div class="css-11xjwpp">{events}</div>'
        f'<div class="css-1is2l86"><svg viewBox="0 0 24 24"><path fill="{flag_fill}" d="M3 3h18v18H3z"/></svg></div>'
        f'<p class="css-cxbjoz">{minutes}</p>'
        f'<div class="css-13oaq36"><div class="fixture-score-container__color"><p>{laliga}</p></div></div>'
        f'<div class="css-66zn4o"><div class="fixture-score-container__color"><p>{bonus}</p></div></div>'
        "</div>"
    )


def build_event_marker(inner, minute=None):
    minute_html = f"<p>{minute}</p>" if minute is not None else ""
    return f'<div class="css-6xe17a">{inner}{minute_html}</div>'


def svg_icon(*paths):
    """paths: (fill, d) tuples; None leaves the attribute out."""
    rendered = []
    for fill, d in paths:
        attrs = []
        if fill is not None:
            attrs.append(f'fill="{fill}"')
        if d is not None:
            attrs.append(f'd="{d}"')
        rendered.append(f"<path {' '.join(attrs)}/>")
    return f'<svg viewBox="0 0 24 24">{"".join(rendered)}</svg>'


def wrap_page(body):
    return f"<html><head><title>Jugador</title></head><body>{body}</body></html>"


@pytest.fixture
def event_row():
    return build_event_row


@pytest.fixture
def event_marker():
    return build_event_marker


@pytest.fixture
def icon():
    return svg_icon


@pytest.fixture
def page():
    return wrap_page


# -------------------- HTML Fixtures -------------------- #

@pytest.fixture
def player_details_html():
    return """
        <div class="MuiBox-root css-header">
            <p class="MuiTypography-root MuiTypography-body1 css-2rah4n"> Pedri </p>
            <p class="MuiTypography-root MuiTypography-body1 css-1f1jjtq">FC Barcelona</p>
            <span class="MuiChip-label css-ev0stz-label"> mc </span>
            <div class="MuiBox-root css-j2at52">
                <svg viewBox="0 0 24 24"><path fill="#32bea6" d="M12 2a10 10 0 1 0 0 20z"/></svg>
            </div>
        </div>
        <div class="MuiBox-root css-stats">
            <div class="MuiBox-root css-stat-row">
                <p class="MuiTypography-root MuiTypography-body1 css-17c0u7v">Titular</p>
                <p class="MuiTypography-root MuiTypography-body1 css-iplaw2"><style>.css-x{color:red}</style>85%</p>
            </div>
            <div class="MuiBox-root css-stat-row">
                <p class="MuiTypography-root MuiTypography-body1 css-17c0u7v">Seguridad</p>
                <p class="MuiTypography-root MuiTypography-body1 css-iplaw2"></p>
                <span class="MuiTypography-root MuiTypography-span css-54ro1u">72,5%</span>
            </div>
            <div class="MuiBox-root css-stat-row">
                <p class="MuiTypography-root MuiTypography-body1 css-17c0u7v">Puntuación esperada titular</p>
                <p class="MuiTypography-root MuiTypography-body1 css-18s8kw9">6,4</p>
            </div>
            <div class="MuiBox-root css-stat-row">
                <p class="MuiTypography-root MuiTypography-body1 css-17c0u7v">Puntuación esperada suplente</p>
                <p class="MuiTypography-root MuiTypography-body1 css-18s8kw9">2,1 pts</p>
            </div>
        </div>
    """


@pytest.fixture
def player_info_html(player_details_html):
    goal = build_event_marker(svg_icon(("#31373D", "M1 1h2v2H1z")), minute="23'")
    yellow = build_event_marker('<div class="css-1qkqqso"></div>', minute="67")
    sub_out = build_event_marker(svg_icon(("#e11d48", "M9 4h6v8h4.84L12 19.84L4.16 12H9V4Z")), minute="78")
    rows = "".join(
        [
            build_event_row(matchday="J15", events=goal + yellow + sub_out),
            build_event_row(
                matchday="J16",
                teams=(("FC Barcelona", 1), ("Sevilla FC", 1)),
                starter=False,
                minutes="25",
                laliga="2",
                bonus="0",
            ),
            # Postponed match: no matchday label
            build_event_row(matchday=None),
            # Broken score cell: a single team block
            build_event_row(matchday="J18", teams=(("FC Barcelona", 2),)),
        ]
    )
    return wrap_page(player_details_html + f'<div class="MuiBox-root css-table">{rows}</div>')


@pytest.fixture
def market_html():
    return wrap_page(
        """
        <div class="MuiBox-root css-summary">
            <div class="MuiBox-root css-card"><p>Precio máximo</p><p>20.500.000€</p><p>2025-03-01</p></div>
            <div class="MuiBox-root css-card"><p>Precio mínimo</p><p>5.000.000€</p><p>2024-08-15</p></div>
            <div class="MuiBox-root css-card"><p>Mayor subida</p><p>1.200.000€</p><p>2025-02-10</p></div>
            <div class="MuiBox-root css-card"><p>Mayor bajada</p><p>-800.000€</p><p>2024-11-02</p></div>
            <div class="MuiBox-root css-card"><p>Puja ideal</p><p>19.000.000€</p></div>
            <div class="MuiBox-root css-card"><p>Puja Máxima</p><p>21.000.000€</p></div>
            <div class="MuiBox-root css-card"><p>Clausula</p><p>99.000.000€</p><p>2025-01-01</p></div>
        </div>
        <div class="MuiBox-root css-values">
            <p class="MuiTypography-root MuiTypography-body1">Subida y bajada de los últimos valores de mercados</p>
            <div class="css-current"><p>Valor actual:</p><p>18.890.000€</p></div>
            <div class="MuiBox-root css-delta"><h4>Último</h4><p>-160.000€</p></div>
            <div class="MuiBox-root css-delta"><h4>Últimos 2</h4><p>-</p></div>
            <div class="MuiBox-root css-delta"><h4>Últimos 3</h4><p>250.000€</p></div>
            <div class="MuiBox-root css-delta"><h4>Últimos 5</h4><p>1.000.000€</p></div>
            <div class="MuiBox-root css-delta"><h4>Últimos 10</h4><p></p></div>
            <div class="MuiBox-root css-delta"><h4>Últimos 14</h4><p>-2.110.000€</p></div>
        </div>
        """
    )
