from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .common import WasmExportsError, write_text
from .manifest import ExportManifest

EXPORTED_FUNCTIONS_FILE = "exported-functions.txt"
EXPORTED_RUNTIME_METHODS_FILE = "exported-runtime-methods.txt"
EXPORTED_INCOMING_METHODS_FILE = "exported-incoming-methods.txt"
TYPESCRIPT_MIRROR_FILE = "runtime-methods.ts"

ARTIFACT_FILES = (
    EXPORTED_FUNCTIONS_FILE,
    EXPORTED_RUNTIME_METHODS_FILE,
    EXPORTED_INCOMING_METHODS_FILE,
    TYPESCRIPT_MIRROR_FILE,
)


@dataclass(frozen=True)
class ArtifactRenderOptions:
    generator_path: str
    linkage_prefix: str = "_"
    type_reference: str | None = "emscripten"
    exports_constant: str = "allExportedFunctions"
    runtime_constant: str = "allRuntimeMethods"


def render_name_list(names: Iterable[str]) -> str:
    # emcc reads "@file" settings as a JSON array; no trailing newline.
    return json.dumps(list(names), separators=(",", ":"))


def render_export_list(names: Iterable[str], linkage_prefix: str = "_") -> str:
    return render_name_list(f"{linkage_prefix}{name}" for name in names)


def _render_const_array(constant: str, names: Iterable[str]) -> list[str]:
    items = [f"  {json.dumps(name)}" for name in names]
    if not items:
        return [f"export const {constant} = [] as const;"]
    return [f"export const {constant} = [", ",\n".join(items), "] as const;"]


def render_typescript_mirror(manifest: ExportManifest, options: ArtifactRenderOptions) -> str:
    lines: list[str] = []
    lines.append("/* AUTO-GENERATED - DO NOT EDIT BY HAND */")
    lines.append(f"/* Generated by {options.generator_path} */")
    if options.type_reference:
        lines.append(f'/// <reference types="{options.type_reference}" />')
    lines.append("")
    lines.extend(_render_const_array(options.exports_constant, manifest.exported_functions))
    lines.append("")
    lines.extend(_render_const_array(options.runtime_constant, manifest.runtime_methods))
    return "\n".join(lines) + "\n"


def render_artifacts(manifest: ExportManifest, options: ArtifactRenderOptions) -> dict[str, str]:
    return {
        EXPORTED_FUNCTIONS_FILE: render_export_list(manifest.exported_functions, options.linkage_prefix),
        EXPORTED_RUNTIME_METHODS_FILE: render_name_list(manifest.runtime_methods),
        EXPORTED_INCOMING_METHODS_FILE: render_name_list(manifest.incoming_methods),
        TYPESCRIPT_MIRROR_FILE: render_typescript_mirror(manifest, options),
    }


def write_artifacts(artifacts: dict[str, str], out_dir: Path) -> list[Path]:
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WasmExportsError(f"Unable to create output directory '{out_dir}': {exc}") from exc

    written: list[Path] = []
    for name, content in artifacts.items():
        path = out_dir / name
        write_text(path, content)
        written.append(path)
    return written


def emit_artifacts(manifest: ExportManifest, out_dir: Path, options: ArtifactRenderOptions) -> list[Path]:
    # All content is rendered before the first write.
    return write_artifacts(render_artifacts(manifest, options), out_dir)
