"""Shared pytest fixtures for the fidlgen test suite.

Provides reusable fixtures for:
- The sample ``fidl.test.echo`` JSON IR
- A compiled ``Root`` for that library
- A fresh ``TemplateRenderer``
- An environment scrubbed of ``FIDLGEN_*`` variables
"""

from __future__ import annotations

from pathlib import Path

import pytest

from fidlgen.ir.models import Root
from fidlgen.scaffolder.templates import TemplateRenderer


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# IR fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def echo_ir_path() -> Path:
    """Path to the ``fidl.test.echo`` JSON IR fixture."""
    path = FIXTURES_DIR / "echo.fidl.json"
    assert path.exists(), f"IR fixture not found at {path}"
    return path


@pytest.fixture
def echo_namespace() -> list[str]:
    return ["fidl", "test", "echo"]


@pytest.fixture
def echo_root(echo_namespace: list[str]) -> Root:
    """Compiled template input for ``fidl.test.echo``."""
    return Root(library=echo_namespace, primary_header="fidl/test/echo/cpp/fidl.h")


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every ``FIDLGEN_*`` variable for the duration of a test."""
    for name in (
        "FIDLGEN_OUTPUT_DIR",
        "FIDLGEN_INCLUDE_BASE",
        "FIDLGEN_CLANG_FORMAT",
        "FIDLGEN_CLANG_FORMAT_STYLE",
        "FIDLGEN_FORMAT_TIMEOUT",
    ):
        monkeypatch.delenv(name, raising=False)
