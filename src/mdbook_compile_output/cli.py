"""Command-line entry point speaking mdBook's preprocessor protocol."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import BinaryIO

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from mdbook_compile_output.config import COMPILE_OUTPUT_LOG_LEVEL
from mdbook_compile_output.exceptions import CompileOutputError, ProtocolError
from mdbook_compile_output.preprocessor import CompileOutputPreprocessor
from mdbook_compile_output.schemas import Book, PreprocessorContext

logger = logging.getLogger(__name__)

_INPUT_ADAPTER = TypeAdapter(tuple[PreprocessorContext, Book])


def resolve_log_level(name: str) -> int:
    """Map a level name such as ``DEBUG`` to its number, defaulting to WARNING."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logging() -> None:
    """Log to stderr; stdout carries the processed book."""
    logging.basicConfig(
        level=resolve_log_level(COMPILE_OUTPUT_LOG_LEVEL),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def parse_input(raw: bytes | str) -> tuple[PreprocessorContext, Book]:
    """Parse the ``[context, book]`` JSON document mdBook writes to stdin.

    Raises:
        ProtocolError: If the input is not valid JSON or has the wrong shape.
    """
    try:
        return _INPUT_ADAPTER.validate_json(raw)
    except ValidationError as exc:
        raise ProtocolError(f"Unable to parse the input: {exc}") from exc


def handle_preprocessing(
    stdin: BinaryIO,
    stdout: BinaryIO,
    preprocessor: CompileOutputPreprocessor | None = None,
) -> None:
    """Read one book, rewrite it and write it back.

    Nothing is written to ``stdout`` unless the whole book was processed.

    Raises:
        ProtocolError: If the input cannot be parsed or the output serialized.
        StepSpawnError: If a step command could not be started.
    """
    pre = preprocessor or CompileOutputPreprocessor()
    ctx, book = parse_input(stdin.read())
    processed = pre.run(ctx, book)
    try:
        payload = processed.to_json()
    except PydanticSerializationError as exc:
        raise ProtocolError(f"Unable to serialize the book: {exc}") from exc
    stdout.write(payload.encode("utf-8"))
    stdout.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the preprocessor and return the process exit status.

    ``supports <renderer>`` succeeds for every renderer. Any other first
    argument, including option-like ones such as ``--help``, is rejected.
    Without arguments the book is read from stdin.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    setup_logging()

    if args:
        if args[0] == "supports":
            return 0
        print(f"unknown argument: {args[0]}", file=sys.stderr)
        return 1

    try:
        handle_preprocessing(sys.stdin.buffer, sys.stdout.buffer)
    except CompileOutputError as exc:
        logger.debug("Preprocessing failed", exc_info=True)
        print(exc, file=sys.stderr)
        return 1
    return 0
