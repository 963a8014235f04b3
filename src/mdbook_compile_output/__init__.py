"""mdbook-compile-output: inline build and test output into mdBook chapters."""

from mdbook_compile_output.exceptions import (
    CompileOutputError,
    ConfigError,
    ProtocolError,
    StepSpawnError,
)
from mdbook_compile_output.markers import extract_step_name
from mdbook_compile_output.preprocessor import (
    CompileOutputPreprocessor,
    PreprocessorOptions,
    iter_chapters,
    preprocess_book,
)
from mdbook_compile_output.rewriter import render_output_block, rewrite_content
from mdbook_compile_output.runner import CommandResult, CommandStepCompiler, StepCompiler, run_step
from mdbook_compile_output.schemas import Book, Chapter, PreprocessorContext

__all__ = [
    "Book",
    "Chapter",
    "CommandResult",
    "CommandStepCompiler",
    "CompileOutputError",
    "CompileOutputPreprocessor",
    "ConfigError",
    "PreprocessorContext",
    "PreprocessorOptions",
    "ProtocolError",
    "StepCompiler",
    "StepSpawnError",
    "extract_step_name",
    "iter_chapters",
    "preprocess_book",
    "render_output_block",
    "rewrite_content",
    "run_step",
]
