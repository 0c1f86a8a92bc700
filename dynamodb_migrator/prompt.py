"""
Confirmation prompts

Imports overwrite data, so they ask before the first write. The import API
only depends on the Confirmer protocol; tests pass their own implementation
instead of driving a terminal.
"""

import logging
import sys
from typing import Callable, Optional, Protocol, TextIO

logger = logging.getLogger(__name__)

AFFIRMATIVE_ANSWERS = ('y', 'yes')


class Confirmer(Protocol):
    """Anything that can answer a yes/no question."""

    def confirm(self, prompt: str) -> bool:
        ...


class TerminalConfirmer:
    """Ask on the terminal; only "y" or "yes" counts as consent.

    The question goes to standard error so an export redirected to a file
    never picks it up.
    """

    def __init__(self, input_func: Callable[[], str] = input, output: Optional[TextIO] = None):
        self._input = input_func
        self._output = output

    def confirm(self, prompt: str) -> bool:
        output = self._output or sys.stderr
        output.write(f"{prompt} [yes/no]: ")
        output.flush()
        try:
            answer = self._input()
        except (EOFError, KeyboardInterrupt, OSError) as e:
            # A prompt that cannot be answered is a "no"
            output.write("\n")
            logger.info(f"Confirmation prompt failed ({e.__class__.__name__}), treating as declined")
            return False
        return answer.strip().lower() in AFFIRMATIVE_ANSWERS


class AlwaysConfirm:
    """Answers yes without asking, for --yes."""

    def confirm(self, prompt: str) -> bool:
        logger.info(f"{prompt} (assumed yes)")
        return True
