from pathlib import Path

from . import WorkdirOption, app


@app.command()
def print_settings(workdir: WorkdirOption = Path(".")) -> None:
    """Print the resolved settings."""
    from rich import print as rich_print

    from ..settings import Settings

    settings = Settings.from_yaml(workdir)
    values = {
        "encoding": settings.encoding,
        "watch_debounce": settings.watch_debounce,
        **{f"paths.{k}": v for k, v in settings.paths.model_dump().items()},
    }
    max_length = max(len(key) for key in values)
    rich_print(
        "\n".join(f"[green]{k:{max_length}}[/] {v}" for k, v in values.items())
    )
