# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding

from taskgantt.view.state import get_show_header


def header(console: Console, run_id: Optional[str], sub_header: Optional[str] = None) -> None:
    """Print the application name, the chart kind and the run being shown.

    Nothing is printed when headers are switched off.
    """
    if not get_show_header():
        return

    title = "[dark_orange]taskgantt[/dark_orange]"
    if sub_header is not None:
        title += f" [sandy_brown]{sub_header}[/sandy_brown]"
    console.print(Padding(title, (1, 0, 0, 1)))
    console.print(Padding(f"[plum1]{run_id or 'no run selected'}[/plum1]", (0, 1)))
