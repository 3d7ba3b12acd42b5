# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from momentum.time import date_to_display_str, today_local
from momentum.view.state import get_show_header


def header(sub_header: Optional[str] = None) -> None:
    """Print the application header with today's date.

    Args:
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{sub_header}[/sandy_brown]"

    print(Padding("[dark_orange]momentum[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
    print(Padding(f"[plum1]{date_to_display_str(today_local())}[/plum1]", (0, 1)))
