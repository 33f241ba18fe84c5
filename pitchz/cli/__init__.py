from logging import INFO, basicConfig, getLogger
from pathlib import Path
from sys import exit

from rich.logging import RichHandler
from typer import Option, Typer
from typing_extensions import Annotated

from ..exceptions import PitchzError
from ..utils import import_module_and_submodules

app = Typer()


WorkdirOption = Annotated[
    Path, Option(help="Path to move into before running the command")
]
DeckOption = Annotated[
    Path | None,
    Option(help="Deck file to use instead of the one from the settings"),
]


def main() -> None:
    basicConfig(
        level=INFO,
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(rich_tracebacks=True, tracebacks_show_locals=False)],
    )
    logger = getLogger(__name__)
    import_module_and_submodules(__name__)
    try:
        app()
    except PitchzError as e:
        logger.critical(str(e))
        exit(1)
