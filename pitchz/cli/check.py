from pathlib import Path

from . import DeckOption, WorkdirOption, app


@app.command()
def check(deck: DeckOption = None, workdir: WorkdirOption = Path(".")) -> None:
    """Parse the deck and report malformed title directives."""
    from ..pipelines import check as pipelines_check
    from ..settings import Settings

    pipelines_check(Settings.from_yaml(workdir), deck)
