"""Book catalog with injected console capabilities.

The Library holds a reference to the caller's list of titles and mutates it
in place: the caller keeps read access and must not assume a snapshot.
"""

from datetime import datetime
from typing import List, Optional

from tddintro.core.protocols import OutputSink, InputSource, Logger
from tddintro.core.implementations import ConsoleLogger
from tddintro.core.exceptions import InputReadError

# Prompts
ENTER_BOOK_PROMPT = "Enter a book to add to the collection"
REMOVE_BOOK_PROMPT = "Enter a book to remove from the collection"
WELCOME_MESSAGE = "Welcome to the library! The current time is "
DEFAULT_TIME_FORMAT = "%H:%M"


class Library:
    """Ordered, mutable collection of book titles.

    Args:
        books: Titles in display order; mutated in place by enter/remove
        output: Where listings and prompts are written
        input_source: Where entered titles are read from
        logger: Diagnostics for read failures (console logger if omitted)
        time_format: strftime format used by the welcome banner
    """

    def __init__(
        self,
        books: List[str],
        output: OutputSink,
        input_source: InputSource,
        logger: Optional[Logger] = None,
        time_format: str = DEFAULT_TIME_FORMAT
    ):
        self._books = books
        self.output = output
        self.input = input_source
        self.log = logger if logger is not None else ConsoleLogger()
        self.time_format = time_format

    @property
    def books(self) -> List[str]:
        return self._books

    def list_books(self) -> None:
        """Write every title, one line each. An empty catalog writes nothing."""
        for book in self._books:
            self.output.write_line(book)

    def enter_book(self) -> None:
        """Prompt for a title and append it to the collection.

        A failed or exhausted read is logged and no title is added.
        """
        self.output.write_line(ENTER_BOOK_PROMPT)
        book = self._read_line("added")
        if book is None:
            return
        self._books.append(book)
        self.log.debug(f"Added '{book}' ({len(self._books)} book(s))")

    def remove_book(self) -> None:
        """Prompt for a title and remove its first exact match, if any."""
        self.output.write_line(REMOVE_BOOK_PROMPT)
        book = self._read_line("removed")
        if book is None:
            return
        if book in self._books:
            self._books.remove(book)
            self.log.debug(f"Removed '{book}' ({len(self._books)} book(s))")

    def welcome(self, now: datetime) -> None:
        """Write the welcome banner with now formatted by time_format."""
        self.output.write_line(WELCOME_MESSAGE + now.strftime(self.time_format))

    def _read_line(self, action: str) -> Optional[str]:
        # Exactly one diagnostic per failed read
        try:
            line = self.input.read_line()
        except InputReadError as e:
            self.log.error(f"{e}; no title {action}")
            return None
        if line is None:
            self.log.warning(f"End of input reached; no title {action}")
        return line


class Application:
    """Entry object that shows the catalog when started."""

    def __init__(self, library: Library):
        self.library = library

    def start(self) -> None:
        self.library.list_books()
