import logging
import sys
from typing import Callable, Optional, TextIO, TypeVar

from rectangles.config import get_config
from rectangles.domain import (
    RectangleCollection,
    parse_coordinates,
    parse_dimensions,
    parse_name_command,
)
from rectangles.exceptions import InputError
from rectangles.utils import performance_logging

logger = logging.getLogger(__name__)

T = TypeVar("T")

FIRST_NAME_PROMPT = "Enter the name of the first rectangle: "
NEXT_NAME_PROMPT = "Enter the name of the next rectangle: "


class RectangleSession:
    """Interactive collection of rectangles followed by a report of every
    rectangle before and after scaling it by 3 about its midpoint.

    Arguments:
        stdin: stream the answers are read from
        stdout: stream prompts and the report are written to
        echo: write every line read back to `stdout`. Useful when answers
            come from a file instead of a terminal.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        echo: bool = False,
    ):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.echo = echo
        self.collection = RectangleCollection()

    def _write(self, text: str):
        self.stdout.write(text)

    def _read_line(self, prompt: str) -> str:
        self._write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("No more input")
        if self.echo:
            self._write(line if line.endswith("\n") else line + "\n")
        return line

    def _ask(
        self, prompt: str, parse: Callable[[str], T], retry_text: str = ""
    ) -> T:
        while True:
            line = self._read_line(prompt)
            try:
                return parse(line)
            except InputError as e:
                logger.debug(f"Rejected input {line.rstrip()!r}: {e}")
                self._write(f"{e}\n{retry_text}")

    def print_welcome_banner(self):
        stop_keyword = get_config("keyword.stop")
        self._write(
            "Welcome! Create your own list of rectangles.\n"
            "You will be asked to provide information about each rectangle "
            "in your list by name.\n"
            f"Type the word '{stop_keyword}' for the rectangle name when "
            "you are done.\n"
            "\n"
        )

    def read_rectangle(self, prompt: str) -> bool:
        """Ask for one rectangle and add it to the collection.

        Returns:
            False when the user typed the stop keyword, True otherwise.
        """
        name = self._ask(
            prompt,
            lambda line: parse_name_command(line, self.collection),
            retry_text="Try again! ",
        )
        if name is None:
            return False

        x, y = self._ask(
            f"Enter {name}'s bottom left x and y coords: ", parse_coordinates
        )
        length, height = self._ask(
            f"Enter {name}'s length and height: ", parse_dimensions
        )
        self.collection.add_rectangle(name, x, y, length, height)
        return True

    def collect(self) -> RectangleCollection:
        prompt = FIRST_NAME_PROMPT
        try:
            while self.read_rectangle(prompt):
                self._write("\nThank you! ")
                prompt = NEXT_NAME_PROMPT
        except EOFError:
            logger.info("Input ended before the stop keyword")
            if not len(self.collection):
                self._write("\n")
        return self.collection

    def print_rectangles(self):
        if not len(self.collection):
            self._write("You have no rectangles in your list.\n")
            return

        self._write(
            f"\nYou have {len(self.collection)} rectangle(s) in your list.\n\n"
        )
        with performance_logging(
            "report", counter=len(self.collection), logger=logger
        ):
            blocks = [
                f"Rectangle '{entry.name}': {entry.before.format()}\n"
                f"After scale by 3: {entry.after.format()}\n"
                for entry in self.collection.report()
            ]
        self._write("\n".join(blocks))

    def run(self) -> RectangleCollection:
        self.print_welcome_banner()
        self.collect()
        self.print_rectangles()
        return self.collection
