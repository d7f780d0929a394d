"""Jinja2 rendering of the implementation-file preamble and postamble.

The preamble carries the license banner, the machine-generation warning,
the includes and one ``namespace <name> {`` line per namespace component.
The postamble closes the same namespaces innermost first.  Both templates
live in this module and are loaded through a ``DictLoader``, so rendering
performs no I/O and holds no state beyond the compiled templates.
"""

from __future__ import annotations

from typing import Any, Iterable

from jinja2 import DictLoader, Environment, StrictUndefined


# ---------------------------------------------------------------------------
# Fixed literals (matched byte-for-byte by license-header checkers)
# ---------------------------------------------------------------------------

LICENSE_BANNER = (
    "// Copyright 2018 The Fuchsia Authors. All rights reserved.\n"
    "// Use of this source code is governed by a BSD-style license that can be\n"
    "// found in the LICENSE file."
)

GENERATION_WARNING = "// WARNING: This file is machine generated by fidlgen."

SUPPORT_HEADER = "lib/fidl/cpp/internal/implementation.h"


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

PREAMBLE_TEMPLATE = """\
{{ license_banner }}
//
{{ generation_warning }}

#include <{{ primary_header }}>

#include "{{ support_header }}"
{% for component in namespace_path %}
namespace {{ component }} {
{% endfor %}
"""

POSTAMBLE_TEMPLATE = """\
{% for component in namespace_path | reverse %}
}  // namespace {{ component }}
{% endfor %}
"""

_TEMPLATES: dict[str, str] = {
    "implementation_preamble": PREAMBLE_TEMPLATE,
    "implementation_postamble": POSTAMBLE_TEMPLATE,
}


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders the implementation scaffolding templates.

    Autoescaping is off: header paths and namespace names are emitted
    verbatim into C++ source.  A single instance may be shared between
    threads.
    """

    def __init__(self, templates: dict[str, str] | None = None) -> None:
        self.env = Environment(
            loader=DictLoader(templates if templates is not None else _TEMPLATES),
            autoescape=False,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        """Render a named template with the provided context."""
        template = self.env.get_template(template_name)
        return template.render(**context)

    # -- Scaffolding -------------------------------------------------------

    def render_preamble(self, namespace_path: Iterable[str], primary_header: str) -> str:
        """Render the banner, includes and namespace openings.

        Args:
            namespace_path: Namespace components, outermost first.  May be
                empty, in which case no namespace is opened.
            primary_header: Include path embedded verbatim as
                ``#include <primary_header>``.
        """
        return self.render(
            "implementation_preamble",
            {
                "license_banner": LICENSE_BANNER,
                "generation_warning": GENERATION_WARNING,
                "support_header": SUPPORT_HEADER,
                "primary_header": primary_header,
                "namespace_path": list(namespace_path),
            },
        )

    def render_postamble(self, namespace_path: Iterable[str]) -> str:
        """Render one ``}  // namespace <name>`` line per component, innermost first.

        An empty path renders as the empty string.
        """
        return self.render(
            "implementation_postamble",
            {"namespace_path": list(namespace_path)},
        )


# ---------------------------------------------------------------------------
# Module-level convenience functions
# ---------------------------------------------------------------------------

_default_renderer = TemplateRenderer()


def render_preamble(namespace_path: Iterable[str], primary_header: str) -> str:
    """Render the preamble with the shared default renderer."""
    return _default_renderer.render_preamble(namespace_path, primary_header)


def render_postamble(namespace_path: Iterable[str]) -> str:
    """Render the postamble with the shared default renderer."""
    return _default_renderer.render_postamble(namespace_path)
