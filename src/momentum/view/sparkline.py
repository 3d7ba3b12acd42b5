# SPDX-License-Identifier: MIT

from typing import Optional, Sequence

from rich.text import Text

BLOCKS = "▁▂▃▄▅▆▇█"
GOOD_STYLE = "green"
BAD_STYLE = "red"


def spark_glyphs(data: Sequence[float]) -> str:
    if not data:
        return ""
    low = min(data)
    spread = max(1.0, max(data) - low)
    return "".join(
        BLOCKS[round((value - low) / spread * (len(BLOCKS) - 1))] for value in data
    )


def sparkline(
    data: Sequence[float],
    up_is_good: bool = False,
    style: str = "bright_white",
) -> Optional[Text]:
    """
    Render a series as block glyphs followed by its start, latest value and
    change. The change is green when it moves in the good direction.
    """
    if not data:
        return None

    first = data[0]
    last = data[-1]
    delta = last - first
    is_good = delta >= 0 if up_is_good else delta <= 0
    arrow = "▲" if delta >= 0 else "▼"

    line = Text()
    line.append(spark_glyphs(data), style=style)
    line.append(f"  Start: {first:g}  Now: {last:g}  ")
    line.append(f"{arrow} {abs(delta):.1f}", style=GOOD_STYLE if is_good else BAD_STYLE)
    return line
