from collections.abc import Callable, Set
from logging import getLogger
from pathlib import Path
from typing import Any, ParamSpec

from watchfiles import watch as watchfiles_watch

_logger = getLogger(__name__)

P = ParamSpec("P")


def watch(
    paths: Set[Path],
    debounce: int,
    function: Callable[P, Any],
    *function_args: P.args,
    **function_kwargs: P.kwargs,
) -> None:
    """Call `function` once, then again each time one of the `paths` changes.

    The parent directories of the `paths` are watched rather than the files \
    themselves, so that files replaced by a rename (as editors do on save) or \
    created later are still picked up. Exceptions raised by `function` are logged \
    and do not stop the watching.

    Args:
        paths: Files to watch.
        debounce: Milliseconds during which changes are grouped into one call.
        function: Function to call.
        function_args: Positional arguments given to `function`.
        function_kwargs: Keyword arguments given to `function`.
    """
    _logger.info("Initial check")
    _call(function, *function_args, **function_kwargs)

    files = frozenset(path.resolve() for path in paths)
    dirs = sorted({path.parent for path in files})
    for _ in watchfiles_watch(
        *dirs,
        watch_filter=lambda _, changed: Path(changed).resolve() in files,
        debounce=debounce,
        raise_interrupt=False,
        recursive=False,
    ):
        _logger.info("Detected changes, checking again")
        _call(function, *function_args, **function_kwargs)
    _logger.info("Stopped watching")


def _call(
    function: Callable[P, Any], *args: P.args, **kwargs: P.kwargs
) -> None:
    try:
        function(*args, **kwargs)
        _logger.info("Check finished")
    except Exception as e:
        _logger.exception(str(e))
