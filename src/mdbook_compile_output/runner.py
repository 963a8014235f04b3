"""Run the external command behind a step and capture its output."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from mdbook_compile_output.config import COMPILE_OUTPUT_COMMAND, COMPILE_OUTPUT_STAGES_DIR
from mdbook_compile_output.exceptions import StepSpawnError

logger = logging.getLogger(__name__)

# Maps a step name to the text inlined in place of its marker.
StepCompiler = Callable[[str], str]


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one step command.

    Attributes:
        returncode: Exit status of the command.
        stdout: Captured standard output, decoded lossily.
        stderr: Captured standard error, decoded lossily.
    """

    returncode: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0

    def selected_output(self) -> str:
        """Standard output on success, standard error otherwise."""
        return self.stdout if self.succeeded else self.stderr


def step_directory(step: str, stages_dir: Path) -> Path:
    """Directory the command for ``step`` runs in.

    The name is used verbatim after trimming; it is not checked for ``..``
    or absolute paths.
    """
    return stages_dir / step.strip()


def run_step(
    step: str,
    *,
    stages_dir: Path = COMPILE_OUTPUT_STAGES_DIR,
    command: Sequence[str] = COMPILE_OUTPUT_COMMAND,
) -> CommandResult:
    """Run ``command`` inside the step's directory and wait for it to exit.

    A non-zero exit status is not an error here; callers decide what to do
    with the captured streams.

    Args:
        step: Step name taken from a marker.
        stages_dir: Base directory holding one project per step.
        command: Program and arguments to execute.

    Returns:
        The exit status and both decoded output streams.

    Raises:
        StepSpawnError: If the command could not be started, e.g. the
            executable or the step directory does not exist.
    """
    cwd = step_directory(step, stages_dir)
    logger.debug("Running %s in %s", " ".join(command), cwd)

    try:
        completed = subprocess.run(
            list(command),
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            capture_output=True,
            check=False,
        )
    except OSError as exc:
        raise StepSpawnError(step, str(cwd), str(exc)) from exc

    logger.info("Step %r exited with status %d", step, completed.returncode)
    return CommandResult(
        returncode=completed.returncode,
        stdout=completed.stdout.decode("utf-8", errors="replace"),
        stderr=completed.stderr.decode("utf-8", errors="replace"),
    )


class CommandStepCompiler:
    """Default ``StepCompiler``: run the step command and keep one stream."""

    def __init__(
        self,
        *,
        stages_dir: Path = COMPILE_OUTPUT_STAGES_DIR,
        command: Sequence[str] = COMPILE_OUTPUT_COMMAND,
    ) -> None:
        self.stages_dir = stages_dir
        self.command = tuple(command)

    def __call__(self, step: str) -> str:
        result = run_step(step, stages_dir=self.stages_dir, command=self.command)
        return result.selected_output()

    def __repr__(self) -> str:
        return f"CommandStepCompiler(stages_dir={str(self.stages_dir)!r}, command={self.command!r})"
