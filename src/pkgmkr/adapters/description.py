"""Read and write the ``DESCRIPTION`` manifest of an R package.

The manifest uses the Debian control file layout: ``Field: value`` lines where
any line starting with whitespace continues the previous field.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

__all__ = ["parse_dcf", "format_dcf", "read_description", "update_description"]


def parse_dcf(text: str) -> dict[str, str]:
    """Return the fields of ``text`` in file order.

    Continuation lines are stripped and joined to the field value with
    newlines.
    """

    fields: dict[str, str] = {}
    current: str | None = None
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        if line[0].isspace():
            if current is None:
                raise ValueError(f"line {line_number}: continuation without a field")
            fields[current] = f"{fields[current]}\n{line.strip()}"
            continue
        key, separator, value = line.partition(":")
        if not separator or not key.strip():
            raise ValueError(f"line {line_number}: expected 'Field: value', got {line!r}")
        current = key.strip()
        fields[current] = value.strip()
    return fields


def format_dcf(fields: dict[str, str]) -> str:
    lines: list[str] = []
    for key, value in fields.items():
        first, *rest = value.split("\n")
        lines.append(f"{key}: {first}".rstrip())
        lines.extend(f"    {part}" for part in rest)
    return "\n".join(lines) + "\n"


def read_description(package_path: Path) -> dict[str, str]:
    return parse_dcf((package_path / "DESCRIPTION").read_text(encoding="utf-8"))


def update_description(package_path: Path, updates: Mapping[str, str]) -> dict[str, str]:
    """Set ``updates`` on the manifest of ``package_path`` and rewrite it.

    Existing fields keep their position; new fields are appended.
    """

    fields = read_description(package_path)
    fields.update(updates)
    (package_path / "DESCRIPTION").write_text(format_dcf(fields), encoding="utf-8")
    return fields
