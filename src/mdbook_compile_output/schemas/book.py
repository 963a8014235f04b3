"""Book tree models mirroring mdBook's JSON representation."""

from __future__ import annotations

from typing import Annotated, Any, Union

from pydantic import BaseModel, ConfigDict, Field


class Chapter(BaseModel):
    """A chapter with Markdown content and nested items.

    Only the fields the preprocessor reads are declared. Everything else mdBook
    sends (``name``, ``number``, ``source_path``, ``parent_names``, ...) is kept
    as extra data and written back untouched.

    Attributes:
        content: Markdown source of the chapter.
        path: Path of the chapter file relative to ``src``; None for drafts.
        sub_items: Nested book items.
    """

    model_config = ConfigDict(extra="allow")

    content: str = ""
    path: str | None = None
    sub_items: list[BookItem] = Field(default_factory=list)

    def is_draft_chapter(self) -> bool:
        """Draft chapters have no backing file and are never rewritten."""
        return self.path is None


class ChapterItem(BaseModel):
    """The ``{"Chapter": {...}}`` variant of a book item."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    chapter: Chapter = Field(..., alias="Chapter")


# Separators arrive as plain strings; part titles and unknown variants stay raw.
BookItem = Annotated[
    Union[ChapterItem, str, dict[str, Any]],
    Field(union_mode="left_to_right"),
]

Chapter.model_rebuild()
ChapterItem.model_rebuild()


class Book(BaseModel):
    """Top-level book. mdBook 0.4 uses ``sections``, 0.5 uses ``items``."""

    model_config = ConfigDict(extra="allow")

    sections: list[BookItem] | None = None
    items: list[BookItem] | None = None

    @property
    def book_items(self) -> list[BookItem]:
        if self.sections is not None:
            return self.sections
        return self.items or []

    def to_json(self) -> str:
        """Serialize using only the item key the input carried."""
        absent = {name for name in ("sections", "items") if getattr(self, name) is None}
        return self.model_dump_json(by_alias=True, exclude=absent)
