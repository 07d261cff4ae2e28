from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from .common import WasmExportsError, require_string_list

TABLE_FIELDS = (
    "manual_functions",
    "excluded_functions",
    "excluded_substrings",
    "runtime_methods",
    "incoming_methods",
)


@dataclass(frozen=True)
class ExportTables:
    """Hand-maintained lists that the header scan cannot infer."""

    manual_functions: tuple[str, ...]
    excluded_functions: frozenset[str]
    excluded_substrings: tuple[str, ...]
    runtime_methods: tuple[str, ...]
    incoming_methods: tuple[str, ...]

    def with_overrides(self, payload: dict[str, Any]) -> "ExportTables":
        unknown = sorted(key for key in payload if key not in TABLE_FIELDS)
        if unknown:
            raise WasmExportsError(f"Unknown config field(s): {', '.join(unknown)}")

        def pick(name: str, current: Iterable[str]) -> list[str]:
            if name in payload:
                return require_string_list(payload[name], name)
            return list(current)

        return ExportTables(
            manual_functions=tuple(pick("manual_functions", self.manual_functions)),
            excluded_functions=frozenset(pick("excluded_functions", sorted(self.excluded_functions))),
            excluded_substrings=tuple(pick("excluded_substrings", self.excluded_substrings)),
            runtime_methods=tuple(pick("runtime_methods", self.runtime_methods)),
            incoming_methods=tuple(pick("incoming_methods", self.incoming_methods)),
        )


@dataclass(frozen=True)
class ExportManifest:
    discovered: tuple[str, ...]
    tables: ExportTables
    exported_functions: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        exports = assemble_exports(
            self.discovered,
            self.tables.manual_functions,
            self.tables.excluded_functions,
            self.tables.excluded_substrings,
        )
        object.__setattr__(self, "exported_functions", tuple(exports))

    @property
    def runtime_methods(self) -> tuple[str, ...]:
        return self.tables.runtime_methods

    @property
    def incoming_methods(self) -> tuple[str, ...]:
        return self.tables.incoming_methods

    @property
    def discovered_count(self) -> int:
        return len(self.discovered)

    @property
    def manual_count(self) -> int:
        return len(self.tables.manual_functions)

    @property
    def excluded(self) -> list[str]:
        return [
            name
            for name in self.discovered
            if is_excluded(name, self.tables.excluded_functions, self.tables.excluded_substrings)
        ]


def is_excluded(name: str, exclude: Iterable[str], exclude_substrings: Iterable[str] = ()) -> bool:
    if name in exclude:
        return True
    return any(marker in name for marker in exclude_substrings)


def assemble_exports(
    discovered: Iterable[str],
    manual: Iterable[str],
    exclude: Iterable[str],
    exclude_substrings: Iterable[str] = (),
) -> list[str]:
    """Manual names, then discovered names minus exclusions; no deduplication."""
    excluded = frozenset(exclude)
    markers = tuple(exclude_substrings)
    result = list(manual)
    result.extend(name for name in discovered if not is_excluded(name, excluded, markers))
    return result


def build_manifest(discovered: Iterable[str], tables: ExportTables) -> ExportManifest:
    return ExportManifest(discovered=tuple(discovered), tables=tables)
