"""fidlgen intermediate representation.

Loads the front-end JSON IR and compiles it into the ``Root`` model the
scaffolder renders.

Usage::

    from fidlgen.ir import compile_library, load_library_ir

    ir = load_library_ir("echo.fidl.json")
    root = compile_library(ir)
    print(root.library, root.primary_header)
"""

from fidlgen.ir.compiler import (
    CompileError,
    compile_library,
    default_primary_header,
    primary_header_for,
)
from fidlgen.ir.models import IRLoadError, LibraryIR, Root, load_library_ir

__all__ = [
    "CompileError",
    "IRLoadError",
    "LibraryIR",
    "Root",
    "compile_library",
    "default_primary_header",
    "load_library_ir",
    "primary_header_for",
]
