"""Compile a ``LibraryIR`` into the ``Root`` consumed by the scaffolder.

Derives the C++ namespace path from the dotted library name and resolves
the include path of the primary header.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Iterable, Optional

from .models import LibraryIR, Root


class CompileError(Exception):
    """Raised when a library cannot be compiled into a ``Root``."""


# C++ keywords and alternative tokens that cannot name a namespace.
CPP_RESERVED_WORDS: frozenset[str] = frozenset({
    "alignas", "alignof", "and", "and_eq", "asm", "auto", "bitand", "bitor",
    "bool", "break", "case", "catch", "char", "char16_t", "char32_t",
    "char8_t", "class", "co_await", "co_return", "co_yield", "compl",
    "concept", "const", "const_cast", "consteval", "constexpr", "constinit",
    "continue", "decltype", "default", "delete", "do", "double",
    "dynamic_cast", "else", "enum", "explicit", "export", "extern", "false",
    "float", "for", "friend", "goto", "if", "inline", "int", "long",
    "mutable", "namespace", "new", "noexcept", "not", "not_eq", "nullptr",
    "operator", "or", "or_eq", "private", "protected", "public", "register",
    "reinterpret_cast", "requires", "return", "short", "signed", "sizeof",
    "static", "static_assert", "static_cast", "struct", "switch", "template",
    "this", "thread_local", "throw", "true", "try", "typedef", "typeid",
    "typename", "union", "unsigned", "using", "virtual", "void", "volatile",
    "wchar_t", "while", "xor", "xor_eq",
})


def split_library_name(name: str) -> list[str]:
    """Split ``fidl.test.echo`` into ``["fidl", "test", "echo"]``."""
    return name.split(".")


def change_if_reserved(name: str) -> str:
    """Append ``_`` to *name* if it is a C++ reserved word."""
    if name in CPP_RESERVED_WORDS:
        return name + "_"
    return name


def format_namespace(components: Iterable[str]) -> list[str]:
    return [change_if_reserved(component) for component in components]


def default_primary_header(library: Iterable[str]) -> str:
    """Conventional header path, e.g. ``fidl/test/echo/cpp/fidl.h``."""
    return "/".join(library) + "/cpp/fidl.h"


def primary_header_for(header_path: str | Path, include_base: str | Path) -> str:
    """Return *header_path* relative to *include_base* as an include path.

    Raises:
        CompileError: If the header does not live under the include base.
    """
    header = Path(header_path)
    base = Path(include_base)
    try:
        relative = header.relative_to(base)
    except ValueError as exc:
        raise CompileError(
            f"Primary header {header} is not under include base {base}"
        ) from exc
    return PurePosixPath(*relative.parts).as_posix()


def compile_library(ir: LibraryIR, primary_header: Optional[str] = None) -> Root:
    """Build the template input for *ir*.

    Args:
        ir: The validated library IR.
        primary_header: Include path of the primary header.  Defaults to
            :func:`default_primary_header` of the library name components,
            before reserved-word escaping.
    """
    components = split_library_name(ir.name)
    if primary_header is None:
        primary_header = default_primary_header(components)
    return Root(library=format_namespace(components), primary_header=primary_header)
