"""Block elements and the containers that hold them.

Elements are the interactive or decorative pieces nested inside blocks.
They appear in three places, each with its own container:

- `BlockElements`: the `elements` array of an actions block
- `Accessory`: the single `accessory` slot of a section block
- `ContextElements`: the `elements` array of a context block, which mixes
  images with text objects
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal, Self

from .codec import decode_object, dumps, encode_variant
from .containers import PydanticCodec, VariantBuckets
from .models import BlockModel
from .objects import (
    ConfirmationBlockObject,
    OptionBlockObject,
    OptionGroupBlockObject,
    TextBlockObject,
)
from .registry import TypeRegistry


class ImageBlockElement(BlockModel):
    type: Literal["image"] = "image"
    image_url: str
    alt_text: str


class ButtonBlockElement(BlockModel):
    type: Literal["button"] = "button"
    text: TextBlockObject
    action_id: str | None = None
    url: str | None = None
    value: str | None = None
    style: Literal["primary", "danger"] | None = None
    confirm: ConfirmationBlockObject | None = None


class OverflowBlockElement(BlockModel):
    type: Literal["overflow"] = "overflow"
    action_id: str | None = None
    options: list[OptionBlockObject]
    confirm: ConfirmationBlockObject | None = None


class DatePickerBlockElement(BlockModel):
    type: Literal["datepicker"] = "datepicker"
    action_id: str | None = None
    placeholder: TextBlockObject | None = None
    initial_date: str | None = None
    confirm: ConfirmationBlockObject | None = None


class SelectBlockElement(BlockModel):
    """A static select menu; either `options` or `option_groups` is set."""

    type: Literal["static_select"] = "static_select"
    placeholder: TextBlockObject
    action_id: str | None = None
    options: list[OptionBlockObject] | None = None
    option_groups: list[OptionGroupBlockObject] | None = None
    initial_option: OptionBlockObject | None = None
    confirm: ConfirmationBlockObject | None = None


BlockElement = (
    ImageBlockElement
    | ButtonBlockElement
    | OverflowBlockElement
    | DatePickerBlockElement
    | SelectBlockElement
)
ContextElement = ImageBlockElement | TextBlockObject

BLOCK_ELEMENT_REGISTRY: TypeRegistry[BlockElement] = TypeRegistry.from_models(
    "block element",
    ImageBlockElement,
    ButtonBlockElement,
    OverflowBlockElement,
    DatePickerBlockElement,
    SelectBlockElement,
)

CONTEXT_ELEMENT_REGISTRY: TypeRegistry[ContextElement] = TypeRegistry.from_models(
    "context element",
    TextBlockObject,
    ImageBlockElement,
)


@dataclass
class BlockElements(VariantBuckets[BlockElement]):
    """Elements of an actions block, grouped by kind.

    Encoding emits images, buttons, overflow menus, date pickers and selects,
    in that order, regardless of the order they were decoded or appended in.
    """

    registry: ClassVar[TypeRegistry[BlockElement]] = BLOCK_ELEMENT_REGISTRY
    buckets: ClassVar[tuple[tuple[str, type[BlockModel]], ...]] = (
        ("image_elements", ImageBlockElement),
        ("button_elements", ButtonBlockElement),
        ("overflow_elements", OverflowBlockElement),
        ("date_picker_elements", DatePickerBlockElement),
        ("select_elements", SelectBlockElement),
    )

    image_elements: list[ImageBlockElement] = field(default_factory=list)
    button_elements: list[ButtonBlockElement] = field(default_factory=list)
    overflow_elements: list[OverflowBlockElement] = field(default_factory=list)
    date_picker_elements: list[DatePickerBlockElement] = field(default_factory=list)
    select_elements: list[SelectBlockElement] = field(default_factory=list)


@dataclass
class ContextElements(VariantBuckets[ContextElement]):
    """Elements of a context block: images first, then text objects."""

    registry: ClassVar[TypeRegistry[ContextElement]] = CONTEXT_ELEMENT_REGISTRY
    buckets: ClassVar[tuple[tuple[str, type[BlockModel]], ...]] = (
        ("image_elements", ImageBlockElement),
        ("text_objects", TextBlockObject),
    )

    image_elements: list[ImageBlockElement] = field(default_factory=list)
    text_objects: list[TextBlockObject] = field(default_factory=list)


@dataclass
class Accessory(PydanticCodec):
    """Single element slot of a section block.

    Only one slot is expected to be set. If several are, encoding picks the
    first in the order image, button, overflow, date picker, select.
    """

    slots: ClassVar[tuple[tuple[str, type[BlockModel]], ...]] = (
        ("image_element", ImageBlockElement),
        ("button_element", ButtonBlockElement),
        ("overflow_element", OverflowBlockElement),
        ("date_picker_element", DatePickerBlockElement),
        ("select_element", SelectBlockElement),
    )

    image_element: ImageBlockElement | None = None
    button_element: ButtonBlockElement | None = None
    overflow_element: OverflowBlockElement | None = None
    date_picker_element: DatePickerBlockElement | None = None
    select_element: SelectBlockElement | None = None

    @classmethod
    def of(cls, element: Any) -> Self:
        """Build an accessory holding `element`; unknown objects leave it empty."""
        accessory = cls()
        for name, kind in cls.slots:
            if isinstance(element, kind):
                setattr(accessory, name, element)
                break
        return accessory

    @classmethod
    def decode(cls, data: Any) -> Self:
        """Decode a single JSON object into a new accessory.

        JSON null and unrecognized element types decode to an empty accessory.
        """
        if isinstance(data, BlockModel):
            return cls.of(data)
        return cls.of(decode_object(data, BLOCK_ELEMENT_REGISTRY))

    @property
    def element(self) -> BlockElement | None:
        """The populated slot with the highest priority, if any."""
        for name, _ in self.slots:
            value = getattr(self, name)
            if value is not None:
                return value
        return None

    def to_json_value(self) -> dict[str, Any] | None:
        element = self.element
        if element is None:
            return None
        return encode_variant(element)

    def to_json(self) -> str:
        return dumps(self.to_json_value())
