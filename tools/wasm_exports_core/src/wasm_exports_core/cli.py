from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import qpdf_profile
from .artifacts import ArtifactRenderOptions, emit_artifacts, render_artifacts
from .common import HeaderReadError, WasmExportsError, diff_against_disk, load_json_object
from .header_scan import scan_header
from .manifest import ExportTables, build_manifest

TOOL_NAME = "qpdf_wasm_exports"
TOOL_PATH = "tools/qpdf_wasm_codegen/qpdf_wasm_exports.py"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=TOOL_NAME,
        description="Generate Emscripten export lists and a TypeScript mirror from the qpdf C API header.",
    )
    parser.add_argument(
        "out_dir",
        nargs="?",
        help=f"Directory for generated files (default: <repo-root>/{qpdf_profile.DEFAULT_OUTPUT_DIR}).",
    )
    parser.add_argument(
        "--qpdf-include",
        help=f"Directory containing the header (default: <repo-root>/{qpdf_profile.DEFAULT_INCLUDE_DIR}).",
    )
    parser.add_argument(
        "--repo-root",
        default=".",
        help="Repository root used to resolve default paths (default: current directory).",
    )
    parser.add_argument("--header-name", default=qpdf_profile.HEADER_NAME)
    parser.add_argument("--export-marker", default=qpdf_profile.EXPORT_MARKER)
    parser.add_argument("--symbol-prefix", default=qpdf_profile.SYMBOL_PREFIX)
    parser.add_argument("--linkage-prefix", default="_", help="Prefix emcc expects on C symbols (default: '_').")
    parser.add_argument("--config", help="JSON object overriding the built-in export tables.")
    parser.add_argument("--check", action="store_true", help="Fail if generated files are out of date; write nothing.")
    parser.add_argument("--dry-run", action="store_true", help="Render and report without writing files.")
    return parser


def resolve_tables(config_path: str | None) -> ExportTables:
    tables = qpdf_profile.default_tables()
    if config_path:
        tables = tables.with_overrides(load_json_object(Path(config_path).resolve()))
    return tables


def run(args: argparse.Namespace) -> int:
    repo_root = Path(args.repo_root).resolve()
    out_dir = Path(args.out_dir).resolve() if args.out_dir else repo_root / qpdf_profile.DEFAULT_OUTPUT_DIR
    if args.qpdf_include:
        include_dir = Path(args.qpdf_include).resolve()
    else:
        include_dir = repo_root / qpdf_profile.DEFAULT_INCLUDE_DIR

    print(f"Output directory: {out_dir}")
    print(f"Include directory: {include_dir}")

    tables = resolve_tables(args.config)

    header_path = include_dir / args.header_name
    print(f"Parsing header: {header_path}")
    discovered = scan_header(header_path, args.export_marker, args.symbol_prefix)

    manifest = build_manifest(discovered, tables)
    print(f"Discovered {manifest.discovered_count} {args.symbol_prefix}* functions from header.")
    print(
        f"  (Plus {manifest.manual_count} manual exports: "
        f"{', '.join(tables.manual_functions) or '<none>'})"
    )
    excluded = manifest.excluded
    if excluded:
        print(f"  (Excluded {len(excluded)}: {', '.join(excluded)})")

    options = ArtifactRenderOptions(generator_path=TOOL_PATH, linkage_prefix=args.linkage_prefix)

    if args.check:
        artifacts = render_artifacts(manifest, options)
        stale = 0
        for name, text in artifacts.items():
            diff = diff_against_disk(out_dir / name, text)
            if diff:
                print("\n".join(diff))
                stale += 1
        if stale:
            print(f"{stale} generated file(s) in {out_dir} are out of date.", file=sys.stderr)
            return 1
        print(f"Generated WASM export configs in {out_dir} are up to date.")
        return 0

    if args.dry_run:
        artifacts = render_artifacts(manifest, options)
        print(f"Dry run: {len(artifacts)} file(s) not written to {out_dir}.")
        return 0

    emit_artifacts(manifest, out_dir, options)
    print(f"Generated WASM export configs in {out_dir}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        return run(args)
    except WasmExportsError as exc:
        print(f"{TOOL_NAME} error: {exc}", file=sys.stderr)
        if isinstance(exc, HeaderReadError):
            print(
                "Make sure git submodules are initialized and the include directory is correct.",
                file=sys.stderr,
            )
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
