"""
Text rendering of board snapshots.

Turns a :class:`BoardSnapshot` into lines of glyphs plus a status
banner. No terminal control here; the CLI decides how to draw it.
"""
from typing import Dict, List

from .board import BoardSnapshot, GameState
from .cell import FLAGGED, HIDDEN, MINE, UNCERTAIN


TITLE = "Minesweeper! (Press q to quit)"

BANNERS: Dict[GameState, str] = {
    GameState.WON: "Congratulations! You win the game! (Press r to restart, q to quit)",
    GameState.LOST: "Game Over! (Press r to restart, q to quit)",
}

UNICODE_GLYPHS: Dict[int, str] = {
    HIDDEN: "▓",
    FLAGGED: "✓",
    UNCERTAIN: "?",
    MINE: "x",
    0: "░",
}

ASCII_GLYPHS: Dict[int, str] = {
    HIDDEN: ".",
    FLAGGED: "F",
    UNCERTAIN: "?",
    MINE: "*",
    0: " ",
}


def glyph_for(value: int, glyphs: Dict[int, str] = UNICODE_GLYPHS) -> str:
    """Glyph for one observation value; numbers 1-8 print as digits."""
    if value in glyphs:
        return glyphs[value]
    return str(value)


def render_rows(
    snapshot: BoardSnapshot,
    glyphs: Dict[int, str] = UNICODE_GLYPHS,
    show_cursor: bool = False,
) -> List[str]:
    """
    Render the grid, one string per board row.

    With ``show_cursor`` every cell takes three columns and the
    cursor cell is wrapped in brackets.
    """
    cursor_x, cursor_y = snapshot.cursor
    rows = []
    for y in range(snapshot.height):
        row = ""
        for x in range(snapshot.width):
            glyph = glyph_for(int(snapshot.observation[y, x]), glyphs)
            if show_cursor:
                if (x, y) == (cursor_x, cursor_y):
                    row += f"[{glyph}]"
                else:
                    row += f" {glyph} "
            else:
                row += glyph
        rows.append(row)
    return rows


def render_board(snapshot: BoardSnapshot, show_cursor: bool = False) -> str:
    """Full screen: title, grid and the win/lose banner if any."""
    lines = [TITLE, ""]
    lines.extend(render_rows(snapshot, UNICODE_GLYPHS, show_cursor))
    lines.append("")
    banner = BANNERS.get(snapshot.state)
    if banner:
        lines.append(banner)
    return "\n".join(lines)


def render_ascii(snapshot: BoardSnapshot) -> str:
    """Plain ASCII grid with a space between cells."""
    rows = render_rows(snapshot, ASCII_GLYPHS)
    return "\n".join(" ".join(row) for row in rows)
