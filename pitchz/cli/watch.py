from pathlib import Path

from . import DeckOption, WorkdirOption, app


@app.command()
def watch(deck: DeckOption = None, workdir: WorkdirOption = Path(".")) -> None:
    """Check the deck again each time it changes."""
    from ..pipelines import watch_check
    from ..settings import Settings

    watch_check(Settings.from_yaml(workdir), deck)
