from pathlib import Path

from typer import Option
from typing_extensions import Annotated

from . import DeckOption, WorkdirOption, app


@app.command()
def code(
    deck: DeckOption = None,
    language: Annotated[
        str | None, Option(help="Only show code blocks in this language")
    ] = None,
    workdir: WorkdirOption = Path("."),
) -> None:
    """Print the fenced code blocks of the deck."""
    from rich.console import Console
    from rich.syntax import Syntax

    from ..pipelines import load
    from ..processing.code_blocks import CodeBlocksProcessor
    from ..settings import Settings

    parsed = load(Settings.from_yaml(workdir), deck)
    console = Console()
    for block in CodeBlocksProcessor(language).process(parsed):
        slide = parsed.slides[block.slide_index]
        title = " > ".join(slide.title_path) or "(untitled)"
        console.rule(f"slide {block.slide_index + 1}: {title}", style="dim")
        console.print(Syntax(block.code.rstrip("\n"), block.language or "text"))
