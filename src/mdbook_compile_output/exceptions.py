"""Custom exceptions for mdbook-compile-output."""


class CompileOutputError(Exception):
    """Base exception for mdbook-compile-output operations."""


class ProtocolError(CompileOutputError):
    """Malformed preprocessor input or unserializable output."""


class ConfigError(CompileOutputError):
    """Invalid preprocessor options."""


class StepSpawnError(CompileOutputError):
    """The command for a step could not be started."""

    def __init__(self, step: str, cwd: str, reason: str) -> None:
        super().__init__(f"Failed to run step {step!r} in {cwd}: {reason}")
        self.step = step
        self.cwd = cwd
