"""ANSI color codes for terminal output."""

import os
from typing import IO, Optional


class Colors:
    """ANSI color codes for log and CLI output."""

    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'

    @staticmethod
    def supported(stream: Optional[IO] = None) -> bool:
        """
        Check whether a stream can render ANSI colors.

        Honors the NO_COLOR convention and only enables colors for TTYs.
        """
        if os.environ.get('NO_COLOR'):
            return False
        if stream is None:
            return False
        isatty = getattr(stream, 'isatty', None)
        return bool(isatty and isatty())
