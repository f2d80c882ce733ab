"""Layout blocks and the top-level Blocks container.

More information: https://api.slack.com/block-kit
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Literal

from pydantic import Field

from .containers import VariantBuckets
from .elements import Accessory, BlockElements, ContextElements
from .models import BlockModel
from .objects import TextBlockObject
from .registry import TypeRegistry


class ActionBlock(BlockModel):
    type: Literal["actions"] = "actions"
    block_id: str | None = None
    elements: BlockElements = Field(default_factory=BlockElements)


class ContextBlock(BlockModel):
    type: Literal["context"] = "context"
    block_id: str | None = None
    elements: ContextElements = Field(default_factory=ContextElements)


class DividerBlock(BlockModel):
    type: Literal["divider"] = "divider"
    block_id: str | None = None


class ImageBlock(BlockModel):
    type: Literal["image"] = "image"
    image_url: str
    alt_text: str
    title: TextBlockObject | None = None
    block_id: str | None = None


class SectionBlock(BlockModel):
    type: Literal["section"] = "section"
    text: TextBlockObject | None = None
    block_id: str | None = None
    fields: list[TextBlockObject] | None = None
    accessory: Accessory | None = None


Block = ActionBlock | ContextBlock | DividerBlock | ImageBlock | SectionBlock

BLOCK_REGISTRY: TypeRegistry[Block] = TypeRegistry.from_models(
    "block",
    ActionBlock,
    ContextBlock,
    DividerBlock,
    ImageBlock,
    SectionBlock,
)


@dataclass
class Blocks(VariantBuckets[Block]):
    """The `blocks` array of a message, grouped by block kind.

    Decoding keeps the order of blocks of the same kind but not the order
    across kinds: encoding emits actions, context, divider, image and
    section blocks in that order.
    """

    registry: ClassVar[TypeRegistry[Block]] = BLOCK_REGISTRY
    buckets: ClassVar[tuple[tuple[str, type[BlockModel]], ...]] = (
        ("action_blocks", ActionBlock),
        ("context_blocks", ContextBlock),
        ("divider_blocks", DividerBlock),
        ("image_blocks", ImageBlock),
        ("section_blocks", SectionBlock),
    )

    action_blocks: list[ActionBlock] = field(default_factory=list)
    context_blocks: list[ContextBlock] = field(default_factory=list)
    divider_blocks: list[DividerBlock] = field(default_factory=list)
    image_blocks: list[ImageBlock] = field(default_factory=list)
    section_blocks: list[SectionBlock] = field(default_factory=list)

    @property
    def block_set(self) -> list[Block]:
        """All blocks as one list, in encode order."""
        return list(self)
