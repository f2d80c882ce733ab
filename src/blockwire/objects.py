"""Composition objects used inside blocks and elements."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from .models import BlockModel, JsonObject

PLAIN_TEXT = "plain_text"
MARKDOWN = "mrkdwn"


class TextBlockObject(BlockModel):
    type: Literal["plain_text", "mrkdwn"]
    text: str
    emoji: bool | None = None
    verbatim: bool | None = None

    @classmethod
    def plain(cls, text: str, emoji: bool | None = None) -> TextBlockObject:
        if emoji is None:
            return cls(type=PLAIN_TEXT, text=text)
        return cls(type=PLAIN_TEXT, text=text, emoji=emoji)

    @classmethod
    def markdown(cls, text: str, verbatim: bool | None = None) -> TextBlockObject:
        if verbatim is None:
            return cls(type=MARKDOWN, text=text)
        return cls(type=MARKDOWN, text=text, verbatim=verbatim)


class OptionBlockObject(JsonObject):
    """An entry of a select menu or overflow menu."""

    text: TextBlockObject
    value: str
    url: str | None = None


class OptionGroupBlockObject(JsonObject):
    label: TextBlockObject
    options: list[OptionBlockObject] = Field(default_factory=list)


class ConfirmationBlockObject(JsonObject):
    """Dialog shown before an interactive element fires its action."""

    title: TextBlockObject
    text: TextBlockObject
    confirm: TextBlockObject
    deny: TextBlockObject
