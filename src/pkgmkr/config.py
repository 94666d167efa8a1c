"""Configuration file support.

A configuration document is a flat mapping with the keys listed in
:data:`CONFIG_KEYS`. ``pkg_name``, ``first_name`` and ``last_name`` are
required; every other key falls back to :data:`CONFIG_DEFAULTS`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .adapters.codec import YamlJsonCodec, normalize_format
from .errors import (
    ConfigEmpty,
    ConfigNotFound,
    ConfigParseError,
    InvalidArgument,
    MissingRequiredField,
)
from .interfaces import ConfigCodec
from .orchestrator import Toolchain, create_package
from .schema import CreationResult

__all__ = [
    "CONFIG_DEFAULTS",
    "CONFIG_KEYS",
    "REQUIRED_FIELDS",
    "create_from_config",
    "infer_format",
    "read_config",
    "request_kwargs_from_config",
    "write_config",
]


LOGGER = logging.getLogger(__name__)

ConfigDocument = dict[str, Any]

REQUIRED_FIELDS = ("pkg_name", "first_name", "last_name")

CONFIG_DEFAULTS: Mapping[str, Any] = {
    "email": None,
    "git": False,
    "git_username": None,
    "git_email": None,
    "readme_md": True,
    "check_pkg_name": True,
    "license": "MIT",
    "pkgdown": False,
}

CONFIG_KEYS = (*REQUIRED_FIELDS, *CONFIG_DEFAULTS)

_SUFFIX_FORMATS = {".json": "json", ".yaml": "yaml", ".yml": "yaml"}


def infer_format(path: str | Path) -> str:
    """Guess the format of ``path`` from its suffix, defaulting to YAML."""

    return _SUFFIX_FORMATS.get(Path(path).suffix.lower(), "yaml")


def _require_path(path: str | Path | None) -> Path:
    if path is None or not str(path).strip():
        raise InvalidArgument("path must be provided and cannot be empty")
    return Path(path).expanduser()


def read_config(
    path: str | Path | None,
    format: str | None = None,
    *,
    codec: ConfigCodec | None = None,
) -> ConfigDocument:
    """Load the configuration document stored at ``path``.

    Parameters
    ----------
    path:
        Location of the configuration file.
    format:
        ``"yaml"`` or ``"json"``. When omitted the format is inferred from the
        file suffix.
    codec:
        Decoder to use instead of :class:`~pkgmkr.adapters.codec.YamlJsonCodec`.
    """

    config_path = _require_path(path)
    file_format = normalize_format(format or infer_format(config_path))
    if not config_path.is_file():
        raise ConfigNotFound(f"config file not found: {config_path}")

    # UnicodeDecodeError and json.JSONDecodeError are both ValueErrors.
    try:
        text = config_path.read_text(encoding="utf-8")
        document = (codec or YamlJsonCodec()).decode(text, file_format)
    except (yaml.YAMLError, ValueError) as error:
        raise ConfigParseError(f"could not parse {file_format} config {config_path}: {error}") from error

    if not document:
        raise ConfigEmpty(f"config file {config_path} contains no entries")
    if not isinstance(document, Mapping):
        raise ConfigParseError(
            f"config {config_path} must contain a mapping, got {type(document).__name__}"
        )
    LOGGER.debug("read %s config from %s", file_format, config_path)
    return dict(document)


def write_config(
    path: str | Path | None,
    document: Mapping[str, Any] | None,
    format: str | None = None,
    *,
    codec: ConfigCodec | None = None,
) -> Path:
    """Write ``document`` to ``path``, creating parent directories as needed."""

    config_path = _require_path(path)
    if document is None:
        raise InvalidArgument("config document cannot be None")
    if not isinstance(document, Mapping):
        raise InvalidArgument(f"config document must be a mapping, got {type(document).__name__}")

    file_format = normalize_format(format or infer_format(config_path))
    text = (codec or YamlJsonCodec()).encode(document, file_format)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(text, encoding="utf-8")
    LOGGER.debug("wrote %s config to %s", file_format, config_path)
    return config_path


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def request_kwargs_from_config(
    document: Mapping[str, Any],
    *,
    base_dir: str | Path | None = None,
) -> dict[str, Any]:
    """Translate ``document`` into keyword arguments for :func:`create_package`.

    Raises
    ------
    MissingRequiredField
        Listing every required key that is absent or blank.
    """

    missing = [key for key in REQUIRED_FIELDS if _is_missing(document.get(key))]
    if missing:
        raise MissingRequiredField(missing)

    unknown = sorted(set(document) - set(CONFIG_KEYS))
    if unknown:
        LOGGER.warning("ignoring unknown config keys: %s", ", ".join(unknown))

    # Explicit nulls fall back to the default as well.
    options = {
        key: default if document.get(key) is None else document[key]
        for key, default in CONFIG_DEFAULTS.items()
    }

    root = Path(base_dir) if base_dir is not None else Path.cwd()
    author = f"{str(document['first_name']).strip()} {str(document['last_name']).strip()}"
    return {
        "path": root / str(document["pkg_name"]).strip(),
        "author": author,
        **options,
    }


def create_from_config(
    config_path: str | Path | None,
    format: str | None = None,
    *,
    base_dir: str | Path | None = None,
    toolchain: Toolchain | None = None,
) -> CreationResult:
    """Create the package described by the configuration file at ``config_path``.

    ``pkg_name`` is resolved against ``base_dir``, which defaults to the
    current working directory.
    """

    document = read_config(config_path, format)
    kwargs = request_kwargs_from_config(document, base_dir=base_dir)
    return create_package(toolchain=toolchain, **kwargs)
