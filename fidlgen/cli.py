"""Command-line entry point for the fidlgen C++ backend.

Usage::

    python -m fidlgen --json echo.fidl.json --output-base gen/fidl/test/echo/cpp/fidl
    python -m fidlgen --json echo.fidl.json --output-base gen/fidl/test/echo/cpp/fidl \\
        --include-base gen --clang-format-path /usr/bin/clang-format
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from fidlgen.config import Config
from fidlgen.ir import (
    CompileError,
    IRLoadError,
    compile_library,
    load_library_ir,
    primary_header_for,
)
from fidlgen.scaffolder import FormatError, ImplementationGenerator
from fidlgen.utils import console, print_error, print_success, print_warning


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fidlgen-cpp",
        description="fidlgen C++ backend -- implementation file scaffolding",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  fidlgen-cpp --json echo.fidl.json --output-base out/echo\n"
            "  fidlgen-cpp --json echo.fidl.json --output-base gen/echo --include-base gen\n"
        ),
    )
    parser.add_argument("--json", required=True, help="Path to the JSON IR file")
    parser.add_argument(
        "--output-base",
        required=True,
        help="Output path without extension; writes <output-base>.cc",
    )
    parser.add_argument(
        "--include-base",
        default=None,
        help="Directory the primary header <output-base>.h is relative to",
    )
    parser.add_argument(
        "--clang-format-path",
        default=None,
        help="clang-format binary to run over the generated file",
    )
    parser.add_argument(
        "--body",
        action="append",
        default=[],
        help="File whose contents are placed inside the namespaces (repeatable)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for ``python -m fidlgen``."""
    args = build_parser().parse_args(argv)

    try:
        config = Config.from_env()
        if args.include_base:
            config.include_base = Path(args.include_base)
        if args.clang_format_path:
            config.clang_format_path = args.clang_format_path

        output_base = Path(args.output_base)
        output_path = config.output_dir / output_base.with_name(output_base.name + ".cc")

        ir = load_library_ir(args.json)
        primary_header = None
        if config.include_base is not None:
            primary_header = primary_header_for(
                output_path.with_suffix(".h"), config.include_base
            )
        root = compile_library(ir, primary_header)
        bodies = []
        for body_path in args.body:
            text = Path(body_path).read_text(encoding="utf-8")
            if not text.strip():
                print_warning(f"Skipping empty body file {body_path}")
                continue
            bodies.append(text)

        generator = ImplementationGenerator(config=config)
        console.print(f"[bold]Generating[/bold] {'.'.join(root.library)}")
        written = asyncio.run(generator.generate(root, output_path, bodies))
    except (
        FileNotFoundError,
        ValueError,
        ValidationError,
        IRLoadError,
        CompileError,
        FormatError,
    ) as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    print_success(f"Generated {written}")


if __name__ == "__main__":
    main()
