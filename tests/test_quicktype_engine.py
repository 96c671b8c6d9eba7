"""
Tests for the quicktype subprocess engine.
"""
import shlex
import sys

import pytest

from adapters.quicktype_engine import QuicktypeEngine
from core.config import AppSettings
from core.interfaces.type_engine import TypeGenerationEngine, TypeGenerationError


def python_command(code: str) -> str:
    return f"{shlex.quote(sys.executable)} -c {shlex.quote(code)}"


def test_build_args(tmp_path):
    engine = QuicktypeEngine(AppSettings(quicktype_command="npx quicktype"))

    assert engine.build_args(tmp_path / "User.json", "user-profile") == [
        "npx",
        "quicktype",
        "--lang",
        "typescript",
        "--src-lang",
        "schema",
        "--just-types",
        "--top-level",
        "UserProfile",
        str(tmp_path / "User.json"),
    ]


def test_satisfies_protocol():
    assert isinstance(QuicktypeEngine(), TypeGenerationEngine)


@pytest.mark.asyncio
async def test_generate_returns_stdout(user_schema):
    # Echo the arguments quicktype would receive.
    code = "import sys; print('|'.join(sys.argv[1:]))"
    engine = QuicktypeEngine(AppSettings(quicktype_command=python_command(code)))

    output = await engine.generate(user_schema, "user")

    args = output.strip().split("|")
    assert args[:7] == ["--lang", "typescript", "--src-lang", "schema", "--just-types", "--top-level", "User"]
    assert args[7].endswith("User.json")


@pytest.mark.asyncio
async def test_non_zero_exit():
    code = "import sys; sys.stderr.write('bad schema'); sys.exit(3)"
    engine = QuicktypeEngine(AppSettings(quicktype_command=python_command(code)))

    with pytest.raises(TypeGenerationError, match="quicktype failed for user: bad schema"):
        await engine.generate({"type": "object"}, "user")


@pytest.mark.asyncio
async def test_missing_command():
    engine = QuicktypeEngine(AppSettings(quicktype_command="typegen-docs-no-such-quicktype"))

    with pytest.raises(TypeGenerationError, match="quicktype not found"):
        await engine.version()


@pytest.mark.asyncio
async def test_timeout():
    code = "import time; time.sleep(5)"
    engine = QuicktypeEngine(
        AppSettings(quicktype_command=python_command(code), quicktype_timeout_seconds=0.2)
    )

    with pytest.raises(TypeGenerationError, match="timed out"):
        await engine.generate({"type": "object"}, "user")
