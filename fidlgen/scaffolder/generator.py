"""Implementation-file assembly.

Brackets opaque declaration bodies with the rendered preamble and
postamble, writes the result, and optionally runs clang-format over it.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Iterable, Optional

from fidlgen.config import Config
from fidlgen.ir.models import Root
from fidlgen.utils import console, run_command, write_text_file

from .templates import TemplateRenderer


class FormatError(Exception):
    """Raised when clang-format fails on a generated file."""


class ImplementationGenerator:
    """Generates the C++ implementation file for one compiled library."""

    def __init__(
        self,
        renderer: Optional[TemplateRenderer] = None,
        config: Optional[Config] = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.config = config or Config()

    # -- Public API --------------------------------------------------------

    def render(self, root: Root, bodies: Iterable[str] = ()) -> str:
        """Return the full file text for *root*.

        Each non-empty body is normalised to end in a single newline and
        separated from its neighbours, the preamble and the postamble by a
        blank line.
        """
        preamble = self.renderer.render_preamble(root.library, root.primary_header)
        postamble = self.renderer.render_postamble(root.library)

        chunks = [preamble]
        chunks.extend(body.rstrip("\n") + "\n" for body in bodies if body.strip())
        chunks.append(postamble)
        return "\n".join(chunks)

    async def generate(
        self,
        root: Root,
        output_path: str | Path,
        bodies: Iterable[str] = (),
    ) -> Path:
        """Render *root* to *output_path*, formatting it if configured.

        Returns:
            The written path.

        Raises:
            FormatError: If the configured clang-format run fails.
        """
        out = Path(output_path)
        content = self.render(root, bodies)
        await asyncio.to_thread(write_text_file, out, content)
        console.print(f"  [dim]Wrote {out}[/dim]")

        if self.config.clang_format_path:
            await self.format_file(out)
        return out

    async def format_file(self, path: Path) -> None:
        """Run clang-format in place on *path*."""
        cmd = [
            str(self.config.clang_format_path),
            "-i",
            f"-style={self.config.clang_format_style}",
            str(path),
        ]
        returncode, _stdout, stderr = await run_command(
            cmd, timeout=self.config.format_timeout
        )
        if returncode != 0:
            raise FormatError(
                f"clang-format exited with {returncode} on {path}: {stderr}"
            )
        console.print(f"  [dim]Formatted {path}[/dim]")
