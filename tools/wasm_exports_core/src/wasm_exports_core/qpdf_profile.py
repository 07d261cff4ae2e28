from __future__ import annotations

from .manifest import ExportTables

HEADER_NAME = "qpdf-c.h"
EXPORT_MARKER = "QPDF_DLL"
SYMBOL_PREFIX = "qpdf_"
DEFAULT_INCLUDE_DIR = "lib/qpdf/include/qpdf"
DEFAULT_OUTPUT_DIR = "build"

MANUAL_FUNCTIONS = (
    "malloc",
    "free",
    "main",
    # libc environment access used by the qpdf CLI
    "getenv",
    "setenv",
    "unsetenv",
    # streaming writer, defined in qpdf-c.cc without a header declaration
    "qpdf_init_write_stream",
    "qpdf_write_begin",
    "qpdf_write_continue",
    "qpdf_get_write_progress",
)

# C++ linkage helpers; they match the prefix but cannot be exported from C.
EXCLUDED_FUNCTIONS = frozenset({"qpdf_c_wrap", "qpdf_c_get_qpdf"})

EXCLUDED_SUBSTRINGS = ("_reserved",)

RUNTIME_METHODS = (
    "ccall",
    "cwrap",
    "setValue",
    "getValue",
    "addFunction",
    "removeFunction",
    "stringToUTF8",
    "UTF8ToString",
    "lengthBytesUTF8",
    "FS",
    "NODEFS",
    "WORKERFS",
    "ENV",
    "callMain",
)

# Module properties accepted at instantiation time.
INCOMING_METHODS = (
    "noInitialRun",
    "noFSInit",
    "locateFile",
    "preRun",
)


def default_tables() -> ExportTables:
    return ExportTables(
        manual_functions=MANUAL_FUNCTIONS,
        excluded_functions=EXCLUDED_FUNCTIONS,
        excluded_substrings=EXCLUDED_SUBSTRINGS,
        runtime_methods=RUNTIME_METHODS,
        incoming_methods=INCOMING_METHODS,
    )
