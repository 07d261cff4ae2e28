from __future__ import annotations

import difflib
import json
from pathlib import Path
from typing import Any


class WasmExportsError(Exception):
    pass


class HeaderReadError(WasmExportsError):
    pass


def load_json_object(path: Path) -> dict[str, Any]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise WasmExportsError(f"Unable to read JSON file '{path}': {exc}") from exc
    except json.JSONDecodeError as exc:
        raise WasmExportsError(f"Invalid JSON in '{path}': {exc}") from exc
    if not isinstance(payload, dict):
        raise WasmExportsError(f"JSON root in '{path}' must be an object")
    return payload


def require_string_list(value: Any, field: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise WasmExportsError(f"Config field '{field}' must be a list of strings")
    return list(value)


def diff_against_disk(path: Path, content: str) -> list[str]:
    try:
        existing = path.read_text(encoding="utf-8") if path.exists() else ""
    except (OSError, UnicodeDecodeError) as exc:
        raise WasmExportsError(f"Unable to read generated file '{path}': {exc}") from exc
    if existing == content:
        return []
    return list(
        difflib.unified_diff(
            existing.splitlines(),
            content.splitlines(),
            fromfile=f"a/{path}",
            tofile=f"b/{path}",
            lineterm="",
        )
    )


def write_text(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise WasmExportsError(f"Unable to write '{path}': {exc}") from exc
