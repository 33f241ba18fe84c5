from logging import getLogger
from pathlib import Path

from .exceptions import DeckNotFoundError
from .models import Deck
from .parsing import Parser
from .settings import Settings
from .watching import watch

_logger = getLogger(__name__)


def deck_path(settings: Settings, deck: Path | None = None) -> Path:
    """Pick the deck file to work on.

    Args:
        settings: Settings of the working directory.
        deck: Explicit deck path, relative to the working directory. Overrides the \
            one from the settings if given.

    Returns:
        Resolved path of the deck file.
    """
    if deck is None:
        return settings.paths.deck
    return (settings.paths.current_dir / deck).resolve()


def load(settings: Settings, deck: Path | None = None) -> Deck:
    return Parser(settings.encoding).from_file(deck_path(settings, deck))


def check(settings: Settings, deck: Path | None = None) -> Deck:
    path = deck_path(settings, deck)
    parsed = Parser(settings.encoding).from_file(path)
    untitled = len(parsed.slides) - len(parsed.titled())
    _logger.info(
        f"{path.name}: {len(parsed.slides)} slides in {len(parsed.sections)} sections"
        + (f", {untitled} without title" if untitled else "")
    )
    return parsed


def watch_check(settings: Settings, deck: Path | None = None) -> None:
    path = deck_path(settings, deck)
    if not path.parent.is_dir():
        msg = f"could not find the directory of deck file {path}"
        raise DeckNotFoundError(msg)
    _logger.info(f"Watching {path}")
    watch(frozenset([path]), settings.watch_debounce, check, settings, path)
