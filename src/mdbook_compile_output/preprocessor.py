"""Walk a book and inline step output into every chapter."""

from __future__ import annotations

import logging
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Iterator

from mdbook_compile_output.config import (
    COMPILE_OUTPUT_COMMAND,
    COMPILE_OUTPUT_STAGES_DIR,
    PREPROCESSOR_NAME,
)
from mdbook_compile_output.exceptions import ConfigError
from mdbook_compile_output.rewriter import rewrite_content
from mdbook_compile_output.runner import CommandStepCompiler, StepCompiler
from mdbook_compile_output.schemas import Book, BookItem, Chapter, ChapterItem, PreprocessorContext

logger = logging.getLogger(__name__)


@dataclass
class PreprocessorOptions:
    """Options for the default step compiler.

    Attributes:
        stages_dir: Directory holding one project per step.
        command: Program and arguments run inside a step directory.
    """

    stages_dir: Path = COMPILE_OUTPUT_STAGES_DIR
    command: tuple[str, ...] = COMPILE_OUTPUT_COMMAND

    @classmethod
    def from_table(cls, table: dict[str, Any]) -> PreprocessorOptions:
        """Build options from a ``[preprocessor.compile-output]`` table.

        Keys missing from the table fall back to the environment defaults.

        Raises:
            ConfigError: If ``stages-dir`` or ``command`` has the wrong type,
                or the command is empty.
        """
        options = cls()

        stages_dir = table.get("stages-dir")
        if stages_dir is not None:
            if not isinstance(stages_dir, str):
                raise ConfigError(f"stages-dir must be a string, got {type(stages_dir).__name__}")
            options.stages_dir = Path(stages_dir).expanduser()

        command = table.get("command")
        if isinstance(command, str):
            options.command = tuple(shlex.split(command))
        elif isinstance(command, list) and all(isinstance(arg, str) for arg in command):
            options.command = tuple(command)
        elif command is not None:
            raise ConfigError("command must be a string or a list of strings")

        if not options.command:
            raise ConfigError("command must not be empty")
        return options


def iter_chapters(items: Iterable[BookItem]) -> Iterator[Chapter]:
    """Yield every chapter depth-first, in document order."""
    for item in items:
        if isinstance(item, ChapterItem):
            yield item.chapter
            yield from iter_chapters(item.chapter.sub_items)


def preprocess_book(book: Book, compile_step: StepCompiler) -> Book:
    """Rewrite every non-draft chapter of ``book`` in place.

    Args:
        book: Book received from mdBook.
        compile_step: Produces the text shown for a step name.

    Returns:
        The same book instance.
    """
    rewritten = 0
    for chapter in iter_chapters(book.book_items):
        if chapter.is_draft_chapter():
            continue
        chapter.content = rewrite_content(chapter.content, compile_step)
        rewritten += 1
    logger.info("Processed %d chapters", rewritten)
    return book


class CompileOutputPreprocessor:
    """Preprocessor replacing ``{{#compile_output: ...}}`` markers."""

    def __init__(self, compile_step: StepCompiler | None = None) -> None:
        self._compile_step = compile_step

    @property
    def name(self) -> str:
        return PREPROCESSOR_NAME

    def compiler_for(self, ctx: PreprocessorContext) -> StepCompiler:
        """Injected compiler, or a command compiler configured from ``book.toml``."""
        if self._compile_step is not None:
            return self._compile_step
        options = PreprocessorOptions.from_table(ctx.preprocessor_options(self.name))
        return CommandStepCompiler(stages_dir=options.stages_dir, command=options.command)

    def run(self, ctx: PreprocessorContext, book: Book) -> Book:
        logger.debug("Running %s for renderer %r (mdBook %s)", self.name, ctx.renderer, ctx.mdbook_version)
        return preprocess_book(book, self.compiler_for(ctx))
