"""End-to-end test running the mumbot entry point against a local IRC server.

Spawns ``python -m mumbot.main`` with a temporary log and is skipped where
``cat`` and ``tail`` are missing.
"""

import asyncio
import os
import shutil
import sys
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
import pytest_asyncio

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        shutil.which("cat") is None or shutil.which("tail") is None,
        reason="cat and tail are required",
    ),
]

SRC_DIR = Path(__file__).resolve().parents[1] / "src"


class IrcServerStub:
    """Accepts one IRC client, welcomes it and records the lines it sends."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.received = asyncio.Event()
        self._server: asyncio.Server | None = None

    @property
    def port(self) -> int:
        assert self._server is not None
        return self._server.sockets[0].getsockname()[1]

    async def start(self) -> None:
        self._server = await asyncio.start_server(self._handle, "127.0.0.1", 0)

    async def close(self) -> None:
        if self._server is not None:
            self._server.close()
            await self._server.wait_closed()

    async def wait_for(self, prefix: str) -> str:
        """Return the first received line starting with prefix."""
        while True:
            for line in self.lines:
                if line.startswith(prefix):
                    return line
            self.received.clear()
            await self.received.wait()

    async def _handle(self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
        while raw := await reader.readline():
            line = raw.decode(errors="replace").strip()
            self.lines.append(line)
            self.received.set()
            if line.startswith("USER"):
                writer.write(b":irc.test 001 mumbot :Welcome\r\n")
                await writer.drain()
        writer.close()


class ProcessOutput:
    """Drains a process's stderr, keeping the lines for inspection."""

    def __init__(self, stream: asyncio.StreamReader) -> None:
        self.lines: list[str] = []
        self._changed = asyncio.Event()
        self._task = asyncio.create_task(self._drain(stream))

    async def wait_for(self, text: str) -> None:
        while not any(text in line for line in self.lines):
            self._changed.clear()
            await self._changed.wait()

    async def closed(self) -> None:
        await self._task

    async def _drain(self, stream: asyncio.StreamReader) -> None:
        while raw := await stream.readline():
            self.lines.append(raw.decode(errors="replace"))
            self._changed.set()


@pytest_asyncio.fixture
async def irc_server() -> AsyncIterator[IrcServerStub]:
    server = IrcServerStub()
    await server.start()
    yield server
    await server.close()


@pytest.mark.asyncio
async def test_main_reports_join_to_irc(irc_server: IrcServerStub, tmp_path: Path) -> None:
    """Given a running mumbot, when a user joins, then a PRIVMSG reaches the IRC channel."""
    log_file = tmp_path / "mumble-server.log"
    log_file.write_text("<1:alice(-1)> Authenticated\n")
    python_path = os.pathsep.join([str(SRC_DIR), os.environ.get("PYTHONPATH", "")])
    env = {**os.environ, "PYTHONPATH": python_path, "LOG_LEVEL": "INFO"}

    process = await asyncio.create_subprocess_exec(
        sys.executable,
        "-m",
        "mumbot.main",
        "-s",
        "127.0.0.1",
        "-p",
        str(irc_server.port),
        "--insecure",
        "-c",
        "#mumble",
        "-f",
        str(log_file),
        "-d",
        "0",
        stderr=asyncio.subprocess.PIPE,
        cwd=tmp_path,
        env=env,
    )
    assert process.stderr is not None
    output = ProcessOutput(process.stderr)
    try:
        async with asyncio.timeout(20):
            await irc_server.wait_for("JOIN #mumble")
            await output.wait_for("Following ")
            # Give tail time to open the file and seek to its end
            await asyncio.sleep(0.5)
            with log_file.open("a") as f:
                f.write("<2:bob(-1)> Authenticated\n")

            privmsg = await irc_server.wait_for("PRIVMSG")
    finally:
        if process.returncode is None:
            process.terminate()
        try:
            async with asyncio.timeout(10):
                await process.wait()
        except TimeoutError:
            process.kill()
            await process.wait()
        await output.closed()

    assert privmsg == "PRIVMSG #mumble :bob joined mumble (2 users online)"
    assert not any("alice" in line for line in irc_server.lines if line.startswith("PRIVMSG"))
