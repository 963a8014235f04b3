"""Replace placeholder lines in chapter content with step output."""

from __future__ import annotations

from typing import Iterator

from mdbook_compile_output.markers import extract_step_name
from mdbook_compile_output.runner import StepCompiler


def iter_lines(content: str) -> Iterator[str]:
    """Split content on ``\\n`` and ``\\r\\n``.

    A trailing newline does not produce an empty final line. A lone ``\\r``
    at the very end is content, not a terminator. Unlike ``str.splitlines``
    no other characters count as line breaks.
    """
    if not content:
        return
    *terminated, last = content.split("\n")
    for part in terminated:
        yield part[:-1] if part.endswith("\r") else part
    if last:
        yield last


def render_output_block(output: str) -> str:
    """Wrap captured output in a fenced ``text`` block."""
    return f"```text\n{output}\n```"


def rewrite_content(content: str, compile_step: StepCompiler) -> str:
    """Return ``content`` with every placeholder line replaced.

    Each output line ends with a single ``\\n``, including the last one.
    Steps run in the order their markers appear.

    Args:
        content: Markdown source of one chapter.
        compile_step: Produces the text shown for a step name.

    Returns:
        The rewritten Markdown.
    """
    rendered: list[str] = []
    for line in iter_lines(content):
        step = extract_step_name(line)
        if step is None:
            rendered.append(line)
        else:
            rendered.append(render_output_block(compile_step(step)))
        rendered.append("\n")
    return "".join(rendered)
