# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding
from rich.text import Text

from bizcal.model.entity_id import short_id
from bizcal.view.state import get_show_header


def header(user_id: str, report_name: Optional[str] = None) -> None:
    """Print the one-line report header: app name, report and signed-in user.

    Suppressed entirely by --no-header.
    """
    if not get_show_header():
        return

    line = Text()
    line.append("bizcal", style="dark_orange")
    if report_name is not None:
        line.append("  ")
        line.append(report_name, style="sandy_brown")
    line.append(f"  user {short_id(user_id)}", style="plum1")

    Console().print(Padding(line, (1, 0, 0, 1)))
