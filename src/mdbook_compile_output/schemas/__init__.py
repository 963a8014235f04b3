"""Shared schemas for mdbook-compile-output."""

from mdbook_compile_output.schemas.book import Book, BookItem, Chapter, ChapterItem
from mdbook_compile_output.schemas.context import PreprocessorContext

__all__ = ["Book", "BookItem", "Chapter", "ChapterItem", "PreprocessorContext"]
