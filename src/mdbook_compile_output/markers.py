"""Detect ``{{#compile_output: <step>}}`` placeholder lines."""

from __future__ import annotations

from mdbook_compile_output.config import MARKER_PREFIX, MARKER_SUFFIX


def extract_step_name(line: str) -> str | None:
    """Return the step named by a placeholder line, or None.

    The line may be indented. It must start with ``{{#compile_output:`` after
    the indentation and end with ``}}``; anything after the closing braces,
    including whitespace, makes it a regular line.

    Args:
        line: A single line of chapter content without its terminator.

    Returns:
        The step name with surrounding whitespace removed, or None if the
        line is not a placeholder.
    """
    stripped = line.lstrip()
    if not stripped.startswith(MARKER_PREFIX):
        return None

    body = stripped[len(MARKER_PREFIX) :]
    if not body.endswith(MARKER_SUFFIX):
        return None

    return body[: -len(MARKER_SUFFIX)].strip()
