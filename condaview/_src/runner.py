import logging
import subprocess
from dataclasses import dataclass
from typing import List, Protocol


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    exit_code: int
    stdout: bytes
    stderr: bytes

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class CommandRunner(Protocol):
    def run(self, args: List[str]) -> CommandResult: ...


class SubprocessRunner:
    """Runs a command to completion and captures its output.

    Spawn failures are not handled here, the ``OSError`` raised by
    ``subprocess`` propagates to the caller unchanged.
    """

    def run(self, args: List[str]) -> CommandResult:
        logger.debug("running `%s`", " ".join(args))
        proc = subprocess.run(args, capture_output=True)
        logger.debug(
            "`%s` exited with %d (stdout: %d bytes, stderr: %d bytes)",
            args[0], proc.returncode, len(proc.stdout), len(proc.stderr),
        )
        return CommandResult(
            exit_code=proc.returncode,
            stdout=proc.stdout,
            stderr=proc.stderr,
        )
