"""Preprocessor context model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PreprocessorContext(BaseModel):
    """Metadata mdBook passes alongside the book.

    Attributes:
        root: Book root directory.
        config: Parsed ``book.toml``.
        renderer: Name of the renderer the book is being built for.
        mdbook_version: Version of the mdBook binary invoking us.
    """

    model_config = ConfigDict(extra="allow")

    root: str = ""
    config: dict[str, Any] = Field(default_factory=dict)
    renderer: str = ""
    mdbook_version: str = ""

    def preprocessor_options(self, name: str) -> dict[str, Any]:
        """Return the ``[preprocessor.<name>]`` table, or an empty dict."""
        table = self.config.get("preprocessor", {})
        if not isinstance(table, dict):
            return {}
        options = table.get(name, {})
        return options if isinstance(options, dict) else {}
