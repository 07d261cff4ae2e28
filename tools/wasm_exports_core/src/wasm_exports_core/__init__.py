from .artifacts import (
    ARTIFACT_FILES,
    ArtifactRenderOptions,
    emit_artifacts,
    render_artifacts,
    render_export_list,
    render_name_list,
    render_typescript_mirror,
    write_artifacts,
)
from .common import HeaderReadError, WasmExportsError, diff_against_disk, load_json_object
from .header_scan import extract_exported_functions, read_header, scan_header, strip_c_comments
from .manifest import ExportManifest, ExportTables, assemble_exports, build_manifest

__all__ = [
    "ARTIFACT_FILES",
    "ArtifactRenderOptions",
    "ExportManifest",
    "ExportTables",
    "HeaderReadError",
    "WasmExportsError",
    "assemble_exports",
    "build_manifest",
    "diff_against_disk",
    "emit_artifacts",
    "extract_exported_functions",
    "load_json_object",
    "read_header",
    "render_artifacts",
    "render_export_list",
    "render_name_list",
    "render_typescript_mirror",
    "scan_header",
    "strip_c_comments",
    "write_artifacts",
]
