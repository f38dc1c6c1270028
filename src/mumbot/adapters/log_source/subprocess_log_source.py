"""Log source reading the server log through ``cat`` and ``tail -F``."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from mumbot.domain.ports import LogSource, LogSourceError

if TYPE_CHECKING:
    from mumbot.domain.ports.log_source import CloseCallback, DataCallback

logger = logging.getLogger(__name__)

READ_CHUNK_SIZE = 64 * 1024


async def _pump(stream: asyncio.StreamReader, on_data: DataCallback) -> None:
    """Forward chunks from stream to on_data until EOF."""
    while chunk := await stream.read(READ_CHUNK_SIZE):
        on_data(chunk)


class SubprocessLogSource(LogSource):
    """Reads a log file by spawning ``cat`` once and ``tail -Fn0`` to follow it."""

    def __init__(
        self,
        path: str,
        cat_command: tuple[str, ...] = ("cat",),
        tail_command: tuple[str, ...] = ("tail", "-Fn0"),
    ) -> None:
        """Initialize the log source.

        Args:
            path: Path of the log file.
            cat_command: Command printing the whole file, path appended.
            tail_command: Command following the file, path appended.
        """
        self.path = path
        self._cat_command = cat_command
        self._tail_command = tail_command
        self._process: asyncio.subprocess.Process | None = None
        self._task: asyncio.Task | None = None

    async def read_all(self, on_data: DataCallback) -> None:
        """Deliver the complete current log content."""
        process = await self._spawn(self._cat_command, stderr=asyncio.subprocess.PIPE)
        if process.stdout is None or process.stderr is None:
            raise LogSourceError(f"No output pipes for reading {self.path}")
        _, stderr = await asyncio.gather(_pump(process.stdout, on_data), process.stderr.read())
        returncode = await process.wait()
        if returncode != 0:
            raise LogSourceError(
                f"Reading {self.path} failed with exit code {returncode}: "
                f"{stderr.decode(errors='replace').strip()}"
            )

    async def follow(self, on_data: DataCallback, on_close: CloseCallback) -> None:
        """Start following appended content."""
        await self.cancel()
        process = await self._spawn(self._tail_command, stderr=asyncio.subprocess.DEVNULL)
        stdout = process.stdout
        if stdout is None:
            process.kill()
            await process.wait()
            raise LogSourceError(f"No output pipe for following {self.path}")
        self._process = process
        self._task = asyncio.create_task(self._follow_loop(process, stdout, on_data, on_close))
        logger.info(f"Following {self.path} (pid {process.pid})")

    async def cancel(self) -> None:
        """Stop following, killing the follow process."""
        process, task = self._process, self._task
        self._process = None
        self._task = None

        if task is not None and not task.done():
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                logger.debug("Follow task cancelled")
        if process is not None and process.returncode is None:
            process.kill()
            await process.wait()
            logger.info(f"Stopped following {self.path} (pid {process.pid})")

    async def _spawn(self, command: tuple[str, ...], stderr: int) -> asyncio.subprocess.Process:
        try:
            return await asyncio.create_subprocess_exec(
                *command, self.path, stdout=asyncio.subprocess.PIPE, stderr=stderr
            )
        except OSError as e:
            raise LogSourceError(f"Cannot run {command[0]} on {self.path}: {e}") from e

    async def _follow_loop(
        self,
        process: asyncio.subprocess.Process,
        stdout: asyncio.StreamReader,
        on_data: DataCallback,
        on_close: CloseCallback,
    ) -> None:
        await _pump(stdout, on_data)
        returncode = await process.wait()
        logger.debug(f"Follow process exited with code {returncode}")
        if self._process is process:
            self._process = None
            self._task = None
        on_close()
