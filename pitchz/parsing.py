"""Turn GitPitch flavored markdown into `Deck`s.

The document is first cut into segments on separator lines (`---` and `+++`), then \
the first line of each segment is checked for a `@title[...]` directive. Segment \
bodies are kept verbatim, fenced code included.
"""

from collections.abc import Iterator
from io import StringIO
from logging import getLogger
from pathlib import Path

from .exceptions import DeckDecodeError, DeckNotFoundError, ParseError
from .models import Deck, Slide, SlideIndex, TitlePath, Transition

__all__ = ["Parser", "load_deck", "parse_deck"]

_logger = getLogger(__name__)

DIRECTIVE_PREFIX = "@title["


class Parser:
    """Build decks from document text or files."""

    def __init__(self, encoding: str = "utf8") -> None:
        """Initialize an instance with the encoding used to read deck files.

        Args:
            encoding: Encoding of the deck files read by `from_file`.
        """
        self._encoding = encoding

    def from_text(self, text: str) -> Deck:
        """Parse a deck from the full text of a document.

        Args:
            text: Content of the document.

        Raises:
            ParseError: Raised if a slide starts with a malformed directive.

        Returns:
            The parsed deck.
        """
        slides = []
        for index, (lines, separator) in enumerate(_segments(text)):
            slides.append(self._parse_slide(SlideIndex(index), lines, separator))
        deck = Deck(tuple(slides))
        _logger.debug(
            f"Parsed {len(deck.slides)} slides in {len(deck.sections)} sections"
        )
        return deck

    def from_file(self, path: Path) -> Deck:
        """Read and parse a deck file.

        Args:
            path: Path to the deck file.

        Raises:
            DeckNotFoundError: Raised if there is no file at `path`.
            DeckDecodeError: Raised if the file is not valid in the configured \
                encoding.
            ParseError: Raised if a slide starts with a malformed directive.

        Returns:
            The parsed deck.
        """
        if not path.is_file():
            msg = f"could not find deck file {path}"
            raise DeckNotFoundError(msg)
        _logger.debug(f"Reading deck from {path}")
        # decoding the raw bytes keeps \r\n line endings so that the deck can be
        # rebuilt exactly
        try:
            text = path.read_bytes().decode(self._encoding)
        except UnicodeDecodeError as e:
            msg = (
                f"could not decode deck file {path} as {self._encoding}: "
                f"invalid byte at position {e.start}"
            )
            raise DeckDecodeError(msg) from e
        return self.from_text(text)

    def _parse_slide(
        self, index: SlideIndex, lines: list[str], separator: str
    ) -> Slide:
        transition = Transition(separator.rstrip()) if separator else None
        if lines and lines[0].lstrip().startswith(DIRECTIVE_PREFIX):
            directive = lines[0]
            return Slide(
                index=index,
                title_path=_parse_directive(index, directive),
                body="".join(lines[1:]),
                directive=directive,
                transition=transition,
                separator=separator,
            )
        return Slide(
            index=index,
            title_path=(),
            body="".join(lines),
            transition=transition,
            separator=separator,
        )


def parse_deck(text: str) -> Deck:
    return Parser().from_text(text)


def load_deck(path: Path, encoding: str = "utf8") -> Deck:
    return Parser(encoding).from_file(path)


def _segments(text: str) -> Iterator[tuple[list[str], str]]:
    """Yield the lines of each segment along with the separator line closing it.

    The last segment is yielded with an empty separator, possibly with no lines if the \
    document ends with a separator.
    """
    lines: list[str] = []
    # only \n, \r\n and \r end lines, unlike str.splitlines
    for line in StringIO(text, newline=""):
        if _is_separator(line):
            yield lines, line
            lines = []
        else:
            lines.append(line)
    yield lines, ""


def _is_separator(line: str) -> bool:
    return line.rstrip() in (Transition.VERTICAL.value, Transition.HORIZONTAL.value)


def _parse_directive(index: SlideIndex, directive: str) -> TitlePath:
    content = directive.strip()[len(DIRECTIVE_PREFIX) :]
    components = []
    current: list[str] = []
    depth = 0
    end = None
    for position, char in enumerate(content):
        if char == "]" and depth == 0:
            end = position
            break
        if char == ":" and depth == 0:
            components.append("".join(current))
            current = []
            continue
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
        current.append(char)
    if end is None:
        reason = "unbalanced brackets" if depth else "missing closing bracket"
        raise ParseError(index, directive, reason)
    if content[end + 1 :]:
        raise ParseError(index, directive, "unexpected text after closing bracket")
    components.append("".join(current))
    title_path = tuple(component.strip() for component in components)
    if not all(title_path):
        raise ParseError(index, directive, "empty title component")
    return title_path
