"""fidlgen C++ backend configuration.

Typed configuration for the implementation-file generator.  Settings use a
Pydantic v2 model so they are validated at construction time and can be
serialised to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Global generator configuration.

    Created once by the CLI entry point (or by a caller embedding the
    generator) and passed to :class:`~fidlgen.scaffolder.ImplementationGenerator`.
    """

    output_dir: Path = Field(default=Path("."))
    include_base: Optional[Path] = Field(
        default=None,
        description="Directory the primary header path is made relative to",
    )
    clang_format_path: Optional[str] = Field(
        default=None,
        description="clang-format binary; formatting is skipped when unset",
    )
    clang_format_style: str = Field(default="google", min_length=1)
    format_timeout: int = Field(
        default=60, ge=1, description="clang-format timeout in seconds"
    )

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            FIDLGEN_OUTPUT_DIR, FIDLGEN_INCLUDE_BASE, FIDLGEN_CLANG_FORMAT,
            FIDLGEN_CLANG_FORMAT_STYLE, FIDLGEN_FORMAT_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("FIDLGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["FIDLGEN_OUTPUT_DIR"])
        if os.environ.get("FIDLGEN_INCLUDE_BASE"):
            kwargs["include_base"] = Path(os.environ["FIDLGEN_INCLUDE_BASE"])
        if os.environ.get("FIDLGEN_CLANG_FORMAT"):
            kwargs["clang_format_path"] = os.environ["FIDLGEN_CLANG_FORMAT"]
        if os.environ.get("FIDLGEN_CLANG_FORMAT_STYLE"):
            kwargs["clang_format_style"] = os.environ["FIDLGEN_CLANG_FORMAT_STYLE"]
        if os.environ.get("FIDLGEN_FORMAT_TIMEOUT"):
            kwargs["format_timeout"] = int(os.environ["FIDLGEN_FORMAT_TIMEOUT"])
        return cls(**kwargs)
