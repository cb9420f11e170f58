"""
Loading of the TOML file that tells the CLI which image to filter and how.

Example::

    box_radius = 3
    gaussian_radius = 5
    emboss_kind = "edge"
    image = "raw_images/small.jpg"
"""
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final, Mapping

from imgfilters.errors import ConfigError, InvalidRadius
from imgfilters.kernels import EmbossVariant

DEFAULT_CONFIG_PATH: Final = 'config.toml'


@dataclass(frozen=True)
class Config:
    box_radius: int
    gaussian_radius: int
    emboss_kind: EmbossVariant
    image: str

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> 'Config':
        return cls(
            box_radius=_radius(raw, 'box_radius'),
            gaussian_radius=_radius(raw, 'gaussian_radius'),
            emboss_kind=_emboss_kind(raw),
            image=_string(raw, 'image'),
        )


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> Config:
    path = Path(path)
    try:
        with path.open('rb') as file:
            raw = tomllib.load(file)
    except FileNotFoundError as e:
        raise ConfigError(f"config is not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"failed to parse config {path}: {e}") from e

    return Config.from_dict(raw)


def _require(raw: Mapping[str, Any], key: str) -> Any:
    if key not in raw:
        raise ConfigError(f"missing field '{key}'")
    return raw[key]


def _radius(raw: Mapping[str, Any], key: str) -> int:
    value = _require(raw, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{key}' must be an integer, got {value!r}")
    if value < 1:
        raise InvalidRadius(value)
    return value


def _emboss_kind(raw: Mapping[str, Any]) -> EmbossVariant:
    value = _require(raw, 'emboss_kind')
    try:
        return EmbossVariant(value)
    except ValueError as e:
        kinds = ', '.join(variant.value for variant in EmbossVariant)
        raise ConfigError(
            f"'emboss_kind' must be one of {kinds}, got {value!r}") from e


def _string(raw: Mapping[str, Any], key: str) -> str:
    value = _require(raw, key)
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string, got {value!r}")
    return value
