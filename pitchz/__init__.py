from typing import Any

__version__ = "0.1.0"

app_name = "pitchz"


def __getattr__(name: str) -> Any:
    """Lazy-load attributes of the pitchz package.

    This way of loading is required to avoid loading any code before some important \
    setup is done (such as logging setup). Loading `pitchz.cli` entails loading \
    `pitchz` first, so the entry point could not setup logging before the parsing \
    modules are imported if they were imported here directly.

    Args:
        name: Name of the attribute to load.

    Raises:
        AttributeError: Raised if the name doesn't match a lazy-loadable attribute.

    Returns:
        Lazy-loaded attribute.
    """
    match name:
        case "load_deck":
            from .parsing import load_deck

            return load_deck
        case "parse_deck":
            from .parsing import parse_deck

            return parse_deck
        case _:
            msg = f"cannot find the attribute {name} in module {__name__}"
            raise AttributeError(msg)
