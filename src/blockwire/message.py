"""Messages carrying blocks, and the action payload sent back on interaction."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .blocks import Block, Blocks
from .models import JsonObject
from .objects import TextBlockObject


class Message(JsonObject):
    """A chat message whose `blocks` field is decoded polymorphically.

    Fields other than `text` and `blocks` are kept as-is.
    """

    text: str | None = None
    blocks: Blocks = Field(default_factory=Blocks)

    def to_json_value(self) -> dict[str, Any]:
        return self.model_dump(mode="json")


class BlockAction(JsonObject):
    """Callback payload sent when a block element is interacted with."""

    action_id: str
    block_id: str | None = None
    text: TextBlockObject | None = None
    value: str | None = None
    type: str
    action_ts: str | None = None


def new_block_message(*blocks: Block) -> Message:
    """Create a new message containing one or more blocks."""
    return Message(blocks=Blocks().append(*blocks))


def add_block_message(message: Message, block: Block) -> Message:
    """Append a block to the existing blocks of a message and return it."""
    message.blocks.append(block)
    return message
