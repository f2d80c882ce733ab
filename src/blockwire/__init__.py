"""Polymorphic JSON encoding and decoding of Block Kit blocks and elements."""

from .blocks import (
    BLOCK_REGISTRY,
    ActionBlock,
    Block,
    Blocks,
    ContextBlock,
    DividerBlock,
    ImageBlock,
    SectionBlock,
)
from .codec import decode_array, decode_object, encode_array, encode_variant, parse_json_if_needed
from .elements import (
    BLOCK_ELEMENT_REGISTRY,
    CONTEXT_ELEMENT_REGISTRY,
    Accessory,
    BlockElement,
    BlockElements,
    ButtonBlockElement,
    ContextElement,
    ContextElements,
    DatePickerBlockElement,
    ImageBlockElement,
    OverflowBlockElement,
    SelectBlockElement,
)
from .errors import BlockCodecError, DiscriminatorError, StructuralError, VariantDecodeError
from .message import BlockAction, Message, add_block_message, new_block_message
from .models import BlockModel
from .objects import (
    MARKDOWN,
    PLAIN_TEXT,
    ConfirmationBlockObject,
    OptionBlockObject,
    OptionGroupBlockObject,
    TextBlockObject,
)
from .registry import TypeRegistry

__all__ = [
    # Blocks
    "Block",
    "Blocks",
    "ActionBlock",
    "ContextBlock",
    "DividerBlock",
    "ImageBlock",
    "SectionBlock",
    # Elements
    "BlockElement",
    "BlockElements",
    "Accessory",
    "ContextElement",
    "ContextElements",
    "ImageBlockElement",
    "ButtonBlockElement",
    "OverflowBlockElement",
    "DatePickerBlockElement",
    "SelectBlockElement",
    # Composition objects
    "BlockModel",
    "TextBlockObject",
    "OptionBlockObject",
    "OptionGroupBlockObject",
    "ConfirmationBlockObject",
    "PLAIN_TEXT",
    "MARKDOWN",
    # Registries
    "TypeRegistry",
    "BLOCK_REGISTRY",
    "BLOCK_ELEMENT_REGISTRY",
    "CONTEXT_ELEMENT_REGISTRY",
    # Codec
    "decode_array",
    "decode_object",
    "encode_array",
    "encode_variant",
    "parse_json_if_needed",
    # Errors
    "BlockCodecError",
    "StructuralError",
    "DiscriminatorError",
    "VariantDecodeError",
    # Messages
    "Message",
    "BlockAction",
    "new_block_message",
    "add_block_message",
]
