"""quicktype as the schema-to-type engine.

Runs the quicktype CLI in a subprocess:
`quicktype --lang typescript --src-lang schema --just-types --top-level <Name> <schema.json>`
"""

from __future__ import annotations

import asyncio
import json
import shlex
import tempfile
from pathlib import Path
from typing import Any

import structlog

from core.config import AppSettings
from core.interfaces.type_engine import TypeGenerationEngine, TypeGenerationError
from core.services.type_transforms import base_type_name

logger = structlog.get_logger(__name__)


class QuicktypeEngine(TypeGenerationEngine):
    """Generates TypeScript declarations with the quicktype CLI."""

    def __init__(self, settings: AppSettings | None = None) -> None:
        self._settings = settings or AppSettings()

    @property
    def command(self) -> list[str]:
        return shlex.split(self._settings.quicktype_command)

    def build_args(self, schema_path: Path, name: str) -> list[str]:
        return [
            *self.command,
            "--lang",
            "typescript",
            "--src-lang",
            "schema",
            "--just-types",
            "--top-level",
            base_type_name(name),
            str(schema_path),
        ]

    async def generate(self, schema: dict[str, Any], name: str) -> str:
        with tempfile.TemporaryDirectory(prefix="typegen-docs-") as tmp:
            schema_path = Path(tmp) / f"{base_type_name(name)}.json"
            schema_path.write_text(json.dumps(schema), encoding="utf-8")
            args = self.build_args(schema_path, name)
            logger.debug("quicktype_start", document=name, args=args)
            stdout, stderr, returncode = await self._run(args)

        if returncode != 0:
            detail = stderr.strip() or f"exit code {returncode}"
            raise TypeGenerationError(f"quicktype failed for {name}: {detail}")
        return stdout

    async def version(self) -> str:
        stdout, stderr, returncode = await self._run([*self.command, "--version"])
        if returncode != 0:
            raise TypeGenerationError(stderr.strip() or f"exit code {returncode}")
        return stdout.strip()

    async def _run(self, args: list[str]) -> tuple[str, str, int]:
        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as exc:
            raise TypeGenerationError(
                f"quicktype not found ({self._settings.quicktype_command}); "
                "install it with `npm install -g quicktype`"
            ) from exc

        try:
            out, err = await asyncio.wait_for(
                process.communicate(),
                timeout=self._settings.quicktype_timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            process.kill()
            await process.wait()
            raise TypeGenerationError(
                f"quicktype timed out after {self._settings.quicktype_timeout_seconds:.0f}s"
            ) from exc

        return out.decode("utf-8", "replace"), err.decode("utf-8", "replace"), process.returncode or 0
