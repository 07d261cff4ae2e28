from __future__ import annotations

import re
from pathlib import Path

from .common import HeaderReadError


def strip_c_comments(content: str) -> str:
    # String literals are not recognised; "//" inside a string is stripped too.
    content = re.sub(r"/\*.*?\*/", "", content, flags=re.S)
    content = re.sub(r"//.*?$", "", content, flags=re.M)
    return content


def exported_function_pattern(export_marker: str, symbol_prefix: str) -> re.Pattern[str]:
    # The return type is an unstructured run of words and '*', which covers
    # "unsigned long", "enum qpdf_result_e", "char const*" and "char const *".
    # The identifier must follow whitespace or a '*'.
    return re.compile(
        rf"\b{re.escape(export_marker)}\s+\w[\w\s*]*[\s*](?P<name>{re.escape(symbol_prefix)}\w+)\s*\("
    )


def extract_exported_functions(content: str, export_marker: str, symbol_prefix: str) -> list[str]:
    pattern = exported_function_pattern(export_marker, symbol_prefix)
    return [match.group("name") for match in pattern.finditer(content)]


def read_header(header_path: Path) -> str:
    # Undecodable bytes (e.g. a Latin-1 copyright sign) become U+FFFD.
    try:
        return header_path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise HeaderReadError(f"Failed to read header file at '{header_path}': {exc}") from exc


def scan_header(header_path: Path, export_marker: str, symbol_prefix: str) -> list[str]:
    content = strip_c_comments(read_header(header_path))
    return extract_exported_functions(content, export_marker, symbol_prefix)
