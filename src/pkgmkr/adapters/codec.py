"""YAML and JSON encoding of configuration documents."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import yaml

from ..errors import UnsupportedConfigFormat
from ..interfaces import ConfigCodec

__all__ = ["FORMATS", "YamlJsonCodec", "normalize_format"]


FORMATS = ("yaml", "json")
_ALIASES = {"yml": "yaml"}


def normalize_format(format: str) -> str:
    """Return the canonical name of ``format`` or raise ``UnsupportedConfigFormat``."""

    key = str(format).strip().lower()
    key = _ALIASES.get(key, key)
    if key not in FORMATS:
        raise UnsupportedConfigFormat(f"file type must be either 'yaml' or 'json', got {format!r}")
    return key


class YamlJsonCodec(ConfigCodec):
    """Decoding errors from PyYAML and :mod:`json` propagate unchanged."""

    def decode(self, text: str, format: str) -> Any:
        if normalize_format(format) == "json":
            return json.loads(text) if text.strip() else None
        return yaml.safe_load(text)

    def encode(self, document: Mapping[str, Any], format: str) -> str:
        if normalize_format(format) == "json":
            return json.dumps(dict(document), indent=4, ensure_ascii=False) + "\n"
        return yaml.safe_dump(
            dict(document),
            indent=4,
            sort_keys=False,
            default_flow_style=False,
            allow_unicode=True,
        )
