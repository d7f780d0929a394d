"""Pydantic v2 models for the fidlgen C++ backend.

``LibraryIR`` is the slice of the front-end JSON IR this backend reads;
``Root`` is the compiled, template-ready view of one library.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, computed_field

from fidlgen.utils import load_json


class IRLoadError(Exception):
    """Raised when a JSON IR file cannot be parsed or validated."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


# ---------------------------------------------------------------------------
# Front-end IR
# ---------------------------------------------------------------------------

class LibraryIR(BaseModel):
    """A FIDL library as emitted by the front-end compiler."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., description="Dotted library name, e.g. fidl.test.echo")
    version: str = Field(default="0.0.1")
    library_dependencies: list[dict[str, Any]] = Field(default_factory=list)
    declarations: dict[str, str] = Field(
        default_factory=dict,
        description="Fully-qualified declaration name -> declaration kind",
    )


# ---------------------------------------------------------------------------
# Compiled template input
# ---------------------------------------------------------------------------

class Root(BaseModel):
    """Template input for one generated implementation file."""

    model_config = ConfigDict(frozen=True)

    library: tuple[str, ...] = Field(
        default=(), description="Namespace path, outermost first"
    )
    primary_header: str = Field(..., description="Include path of the primary header")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def library_reversed(self) -> tuple[str, ...]:
        """The namespace path innermost first, derived from ``library``."""
        return tuple(reversed(self.library))


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def load_library_ir(path: str | Path) -> LibraryIR:
    """Read and validate a JSON IR file.

    Raises:
        FileNotFoundError: If *path* does not exist.
        IRLoadError: If the file is not valid JSON or not a library IR.
    """
    ir_path = Path(path)
    if not ir_path.exists():
        raise FileNotFoundError(f"IR file not found: {ir_path}")

    try:
        data = load_json(ir_path)
    except json.JSONDecodeError as exc:
        raise IRLoadError(ir_path, f"invalid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise IRLoadError(ir_path, "expected a JSON object")

    try:
        return LibraryIR.model_validate(data)
    except ValidationError as exc:
        raise IRLoadError(ir_path, f"invalid library IR: {exc}") from exc
