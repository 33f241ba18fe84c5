from pathlib import Path

from . import DeckOption, WorkdirOption, app


@app.command()
def stats(deck: DeckOption = None, workdir: WorkdirOption = Path(".")) -> None:
    """Print statistics about the deck."""
    from rich import print as rich_print
    from rich.table import Table

    from ..pipelines import load
    from ..processing.stats import StatsProcessor
    from ..settings import Settings

    deck_stats = StatsProcessor().process(load(Settings.from_yaml(workdir), deck))
    table = Table("Statistic", "Value")
    table.add_row("Sections", str(deck_stats.sections))
    table.add_row("Slides", str(deck_stats.slides))
    table.add_row("Titled slides", str(deck_stats.titled_slides))
    table.add_row("Untitled slides", str(deck_stats.untitled_slides))
    for language, count in deck_stats.code_blocks.items():
        table.add_row(f"Code blocks ({language or 'untagged'})", str(count))
    rich_print(table)
