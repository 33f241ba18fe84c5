from pathlib import Path

from . import DeckOption, WorkdirOption, app


@app.command()
def tree(
    deck: DeckOption = None,
    code: bool = False,
    workdir: WorkdirOption = Path("."),
) -> None:
    """Show the outline of the deck.

    Args:
        deck: Deck file to use instead of the one from the settings.
        code: Show the languages of the code blocks of each slide.
        workdir: Path to move into before running the command.
    """
    from rich import print as rich_print

    from ..pipelines import deck_path, load
    from ..processing.rich_tree import RichTreeProcessor
    from ..settings import Settings

    settings = Settings.from_yaml(workdir)
    parsed = load(settings, deck)
    name = deck_path(settings, deck).name
    rich_print(RichTreeProcessor(name, with_code=code).process(parsed))
