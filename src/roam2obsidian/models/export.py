"""Pydantic models for the Roam Research JSON export.

A Roam export is a JSON array of pages. Each page owns an ordered tree of
blocks; every block carries a 9-character UID that is unique across the
whole graph. Field names follow the export's kebab-case keys through
aliases, so models can be validated straight from ``json.load`` output.
"""

from datetime import datetime, timezone
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _coerce_timestamp(value: Any) -> Any:
    """Convert Roam's epoch-millisecond timestamps to aware datetimes.

    Missing or zero timestamps fall back to the current time.
    """
    if value is None or value == 0:
        return _now()
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    return value


class Emoji(BaseModel):
    """Emoji reaction attached to a block (passed through untouched)."""

    emoji: dict[str, Any] = Field(default_factory=dict)
    users: list[dict[str, Any]] = Field(default_factory=list)


class _Timestamped(BaseModel):
    """Creation/edit metadata shared by pages and blocks."""

    model_config = ConfigDict(populate_by_name=True)

    create_time: datetime = Field(default_factory=_now, alias="create-time")
    edit_time: datetime = Field(default_factory=_now, alias="edit-time")
    create_email: Optional[str] = Field(default=None, alias="create-email")
    edit_email: Optional[str] = Field(default=None, alias="edit-email")

    @field_validator("create_time", "edit_time", mode="before")
    @classmethod
    def parse_timestamp(cls, v: Any) -> Any:
        return _coerce_timestamp(v)


class RoamBlock(_Timestamped):
    """Single block in a page's content tree.

    Attributes:
        uid: Globally unique block identifier (9 characters in Roam exports)
        string: Raw block text, may contain reference markup and newlines
        children: Child blocks in document order
        heading: Heading level (0 = not a heading)
        text_align: Alignment metadata, not interpreted
        emojis: Emoji reactions, not interpreted
    """

    uid: str = ""
    string: str = ""
    children: list["RoamBlock"] = Field(default_factory=list)
    heading: int = 0
    text_align: Optional[str] = Field(default=None, alias="text-align")
    emojis: list[Emoji] = Field(default_factory=list)

    @field_validator("heading", mode="before")
    @classmethod
    def default_heading(cls, v: Any) -> Any:
        """Roam writes ``null`` for blocks that were once headings."""
        return 0 if v is None else v

    @field_validator("string", mode="before")
    @classmethod
    def default_string(cls, v: Any) -> Any:
        return "" if v is None else v


class RoamPage(_Timestamped):
    """Top-level page of the export.

    ``title`` is rewritten in place during indexing when it names a daily
    note, and ``is_daily`` records that it did.
    """

    title: str = ""
    children: list[RoamBlock] = Field(default_factory=list)
    is_daily: bool = Field(default=False, exclude=True)

    @field_validator("title", mode="before")
    @classmethod
    def default_title(cls, v: Any) -> Any:
        return "" if v is None else v


# Anything the renderer can walk: a page or a block with children
Parent = Union[RoamPage, RoamBlock]
