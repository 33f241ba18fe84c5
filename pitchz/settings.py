# mypy: ignore-errors
from functools import reduce
from pathlib import Path
from typing import Annotated, Any, Self

from appdirs import user_config_dir as appdirs_user_config_dir
from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    ValidationInfo,
)

from . import app_name
from .utils import dirs_hierarchy, load_all_yamls

SETTINGS_FILE_NAME = f"{app_name}.yml"


def _convert(input_value: str | Path, info: ValidationInfo) -> Path:
    if isinstance(input_value, str):
        return Path(input_value.format(**info.data))
    return input_value


_Path = Annotated[Path, BeforeValidator(_convert), AfterValidator(Path.resolve)]
_user_config_dir = Path(appdirs_user_config_dir(app_name)).resolve()


class Paths(BaseModel):
    model_config = ConfigDict(validate_default=True)
    current_dir: _Path
    user_config_dir: _Path = _user_config_dir
    deck: _Path = "{current_dir}/PITCHME.md"


class Settings(BaseModel):
    encoding: str = "utf8"
    watch_debounce: int = Field(default=1600, ge=0)
    """Milliseconds during which file changes are grouped before checking again."""

    paths: Paths

    @classmethod
    def from_yaml(cls, path: Path) -> Self:
        """Load the settings applying to a working directory.

        Settings files are read from the user config directory first, then from each \
        directory between the filesystem root and `path`. Later files override the \
        keys of earlier ones.

        Args:
            path: Working directory.

        Returns:
            The merged settings.
        """
        resolved_path = path.resolve()
        content: dict[str, Any] = reduce(
            lambda a, b: {**a, **b},
            load_all_yamls(
                d / SETTINGS_FILE_NAME
                for d in dirs_hierarchy(_user_config_dir, resolved_path)
            ),
            {},
        )
        content["paths"] = content.get("paths") or {}
        content["paths"].setdefault("current_dir", resolved_path)
        content["paths"].setdefault("user_config_dir", _user_config_dir)
        return cls.model_validate(content)
