"""fidlgen scaffolder -- renders C++ implementation-file scaffolding.

Produces the preamble (license banner, generation warning, includes,
namespace openings) and postamble (namespace closings, innermost first)
that bracket generated declarations.

Quick usage::

    from fidlgen.scaffolder import render_postamble, render_preamble

    head = render_preamble(["fidl", "test", "echo"], "fidl/test/echo/cpp/fidl.h")
    tail = render_postamble(["fidl", "test", "echo"])
"""

from fidlgen.scaffolder.generator import FormatError, ImplementationGenerator
from fidlgen.scaffolder.templates import (
    GENERATION_WARNING,
    LICENSE_BANNER,
    SUPPORT_HEADER,
    TemplateRenderer,
    render_postamble,
    render_preamble,
)

__all__ = [
    "FormatError",
    "GENERATION_WARNING",
    "ImplementationGenerator",
    "LICENSE_BANNER",
    "SUPPORT_HEADER",
    "TemplateRenderer",
    "render_postamble",
    "render_preamble",
]
