"""External command runner: npm / vsce / code invocations.

Commands are spawned without a shell, with argument vectors, and their
output is captured.  A non-zero exit, a spawn error or a timeout raises
``CommandError``.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Literal

logger = logging.getLogger(__name__)

BumpKind = Literal["patch", "minor", "major"]
BUMP_KINDS: tuple[str, ...] = ("patch", "minor", "major")

# These are .cmd shims on Windows and cannot be spawned bare.
_WINDOWS_SHIMS = frozenset({"npm", "npx", "code", "code-insiders"})


class CommandError(RuntimeError):
    """Raised when an external command fails."""

    def __init__(self, message: str, *, returncode: int | None = None, output: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.output = output


def resolve_executable(command: str, platform: str | None = None) -> str:
    """Map a command name to the executable actually spawned."""
    platform = platform or sys.platform
    if platform == "win32" and command in _WINDOWS_SHIMS:
        return f"{command}.cmd"
    return command


class CommandRunner:
    """Runs the suite's build, package and publish commands.

    Parameters
    ----------
    timeout:
        Seconds before a single command is killed.  None waits forever.
    """

    def __init__(self, *, timeout: float | None = None) -> None:
        self._timeout = timeout

    async def run(self, command: str, args: list[str], cwd: Path | None = None) -> str:
        """Run one command and return its stdout."""
        executable = resolve_executable(command)
        logger.debug("Running %s %s (cwd=%s)", executable, " ".join(args), cwd)
        try:
            proc = await asyncio.create_subprocess_exec(
                executable,
                *args,
                cwd=str(cwd) if cwd else None,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise CommandError(f"Could not start {executable}: {exc}") from exc

        try:
            stdout_b, stderr_b = await asyncio.wait_for(
                proc.communicate(), timeout=self._timeout
            )
        except asyncio.TimeoutError as exc:
            proc.kill()
            await proc.wait()
            raise CommandError(
                f"{executable} timed out after {self._timeout}s"
            ) from exc

        stdout = stdout_b.decode(errors="replace")
        stderr = stderr_b.decode(errors="replace")
        if proc.returncode != 0:
            detail = (stderr or stdout).strip()
            raise CommandError(
                f"Command failed with code {proc.returncode}: {detail}",
                returncode=proc.returncode,
                output=stdout + stderr,
            )
        return stdout

    # ------------------------------------------------------------------
    # Suite commands
    # ------------------------------------------------------------------

    async def build(self, project_path: Path) -> str:
        try:
            return await self.run("npm", ["run", "compile"], project_path)
        except CommandError as exc:
            raise CommandError(f"Compile failed: {exc}", returncode=exc.returncode, output=exc.output) from exc

    async def package(self, project_path: Path) -> str:
        try:
            return await self.run("npx", ["vsce", "package"], project_path)
        except CommandError as exc:
            raise CommandError(f"Package failed: {exc}", returncode=exc.returncode, output=exc.output) from exc

    async def publish(self, project_path: Path, bump: BumpKind) -> str:
        if bump not in BUMP_KINDS:
            raise ValueError(f"Unknown version bump {bump!r}; expected one of {BUMP_KINDS}")
        try:
            return await self.run("npx", ["vsce", "publish", bump, "--no-verify"], project_path)
        except CommandError as exc:
            raise CommandError(f"Publish failed: {exc}", returncode=exc.returncode, output=exc.output) from exc

    async def list_publishers(self) -> list[str]:
        """Publisher ids known to vsce, or an empty list if vsce is unavailable."""
        try:
            stdout = await self.run("npx", ["vsce", "ls-publishers"])
        except CommandError as exc:
            logger.warning("Could not list publishers: %s", exc)
            return []
        return [line.strip() for line in stdout.splitlines() if line.strip()]
