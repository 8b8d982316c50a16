"""
audex.process - External tool invocation.

Every ffprobe/ffmpeg call goes through run_tool, so probing and extraction
can be exercised with a substitute runner that never spawns a process.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path

from audex.exceptions import DependencyError

logger = logging.getLogger(__name__)

INSTALL_HINT = "Install with: brew install ffmpeg (macOS) or apt install ffmpeg (Linux)"


@dataclass(frozen=True)
class ToolResult:
    """Exit status and captured output of one tool run."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


Runner = Callable[[Sequence[str]], ToolResult]


def run_tool(args: Sequence[str]) -> ToolResult:
    """Run an external tool and wait for it to exit.

    Args:
        args: Executable followed by its arguments

    Returns:
        ToolResult with the exit status and captured stdout/stderr

    Raises:
        DependencyError: If the executable cannot be launched
    """
    cmd = [str(a) for a in args]
    logger.debug("Running: %s", shlex.join(cmd))

    try:
        proc = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            errors="replace",
        )
    except FileNotFoundError as e:
        name = Path(cmd[0]).name
        raise DependencyError(name, f"{cmd[0]} not found", INSTALL_HINT) from e
    except PermissionError as e:
        name = Path(cmd[0]).name
        raise DependencyError(name, f"{cmd[0]} is not executable") from e
    except OSError as e:
        name = Path(cmd[0]).name
        raise DependencyError(name, f"{cmd[0]} could not be started: {e.strerror or e}") from e

    logger.debug("%s exited with status %d", Path(cmd[0]).name, proc.returncode)
    return ToolResult(proc.returncode, proc.stdout, proc.stderr)
