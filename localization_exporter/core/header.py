"""Banner written at the top of generated .strings files."""

from datetime import datetime
from typing import List, Optional

BANNER_WIDTH = 79
EXPORT_SOURCE = 'Exported from POEditor - https://poeditor.com'


def format_timestamp(now: Optional[datetime] = None) -> str:
    """Local time with UTC offset, e.g. 2024-05-02 14:03:11 +0200."""
    now = now or datetime.now().astimezone()
    return now.strftime('%Y-%m-%d %H:%M:%S %z').rstrip()


def build_header(print_date: bool = False, now: Optional[datetime] = None) -> List[str]:
    """
    Build the comment banner for a .strings file.

    Args:
        print_date: Add a line with the generation time
        now: Time to print instead of the current time

    Returns:
        Header lines, ending with a blank line
    """
    lines = ['/' + '*' * BANNER_WIDTH, f' * {EXPORT_SOURCE}']
    if print_date:
        lines.append(f' * {format_timestamp(now)}')
    lines += [' ' + '*' * BANNER_WIDTH + '/', '']
    return lines
