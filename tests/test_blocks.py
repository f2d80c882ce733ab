"""Tests for block models and the Blocks container."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from blockwire import (
    ActionBlock,
    Blocks,
    ButtonBlockElement,
    ContextBlock,
    DividerBlock,
    ImageBlock,
    SectionBlock,
    StructuralError,
    TextBlockObject,
)

from fakes import (
    ACTIONS,
    BUTTON,
    CONTEXT,
    DIVIDER,
    IMAGE_BLOCK,
    IMAGE_ELEMENT,
    MRKDWN,
    PLAIN,
    SECTION,
    STATIC_SELECT,
    payload,
)


def test_decode_four_kinds_one_per_bucket() -> None:
    blocks = Blocks.decode(payload(SECTION, DIVIDER, IMAGE_BLOCK, ACTIONS))
    assert len(blocks.section_blocks) == 1
    assert len(blocks.divider_blocks) == 1
    assert len(blocks.image_blocks) == 1
    assert len(blocks.action_blocks) == 1
    assert blocks.context_blocks == []


def test_append_fifth_kind_fills_its_bucket() -> None:
    blocks = Blocks.decode(payload(SECTION, DIVIDER, IMAGE_BLOCK, ACTIONS))
    context = ContextBlock.model_validate(CONTEXT)
    blocks.append(context)
    assert blocks.context_blocks == [context]
    assert len(blocks) == 5


def test_encode_order_follows_bucket_declaration() -> None:
    blocks = Blocks.decode(payload(SECTION, DIVIDER, CONTEXT, IMAGE_BLOCK, ACTIONS))
    assert [b["type"] for b in blocks.to_json_value()] == [
        "actions",
        "context",
        "divider",
        "image",
        "section",
    ]
    assert [b.type for b in blocks.block_set] == [
        "actions",
        "context",
        "divider",
        "image",
        "section",
    ]


def test_round_trip_preserves_fields_within_each_block() -> None:
    blocks = Blocks.decode(payload(SECTION, DIVIDER, IMAGE_BLOCK, ACTIONS))
    encoded = {b["type"]: b for b in blocks.to_json_value()}
    assert encoded["section"] == SECTION
    assert encoded["divider"] == DIVIDER
    assert encoded["image"] == IMAGE_BLOCK
    # elements of an actions block are re-emitted in element kind order
    assert encoded["actions"] == ACTIONS


def test_context_block_reorders_images_first() -> None:
    blocks = Blocks.decode(payload(CONTEXT))
    assert blocks.to_json_value() == [
        {"type": "context", "elements": payload(IMAGE_ELEMENT, MRKDWN, PLAIN)}
    ]


def test_nested_elements_are_decoded_polymorphically() -> None:
    blocks = Blocks.decode(payload(ACTIONS, SECTION))
    action = blocks.action_blocks[0]
    assert isinstance(action.elements.button_elements[0], ButtonBlockElement)
    assert action.elements.select_elements[0].action_id == "priority"
    section = blocks.section_blocks[0]
    assert section.accessory is not None
    assert section.accessory.button_element.value == "ticket-42"


def test_unknown_block_types_are_dropped() -> None:
    header = {"type": "header", "text": {"type": "plain_text", "text": "Hi"}}
    blocks = Blocks.decode(payload(header, DIVIDER, {"type": "rich_text", "elements": []}))
    assert len(blocks) == 1
    assert blocks.to_json_value() == [DIVIDER]


def test_nested_decode_error_fails_outer_block() -> None:
    bad_actions = {"type": "actions", "elements": [BUTTON, "not-an-element"]}
    with pytest.raises(ValidationError):
        ActionBlock.model_validate(bad_actions)


def test_block_models_accept_built_elements() -> None:
    button = ButtonBlockElement(text=TextBlockObject.plain("Go"), action_id="go")
    action = ActionBlock(block_id="a1", elements=[button])
    assert action.elements.button_elements == [button]
    assert action.to_json_value() == {
        "type": "actions",
        "block_id": "a1",
        "elements": [{"type": "button", "text": {"type": "plain_text", "text": "Go"}, "action_id": "go"}],
    }


def test_section_with_accessory_element() -> None:
    section = SectionBlock(
        text=TextBlockObject.markdown("*Due*"),
        accessory=ButtonBlockElement.model_validate(BUTTON),
    )
    assert section.to_json_value()["accessory"] == BUTTON


def test_section_without_accessory_omits_it() -> None:
    section = SectionBlock.model_validate({"type": "section", "text": PLAIN})
    assert section.accessory is None
    assert "accessory" not in section.to_json_value()


def test_default_containers_are_empty() -> None:
    assert ActionBlock().to_json_value() == {"type": "actions", "elements": []}
    assert ContextBlock().to_json_value() == {"type": "context", "elements": []}
    assert DividerBlock().to_json_value() == {"type": "divider"}


def test_image_block_and_image_element_are_distinct() -> None:
    blocks = Blocks.decode(payload(IMAGE_BLOCK))
    assert isinstance(blocks.image_blocks[0], ImageBlock)
    assert blocks.image_blocks[0].title.text == "Weekly chart"


def test_actions_round_trip_regroups_elements() -> None:
    actions = {"type": "actions", "elements": payload(STATIC_SELECT, BUTTON)}
    blocks = Blocks.decode([actions])
    assert blocks.to_json_value()[0]["elements"] == payload(BUTTON, STATIC_SELECT)


def test_null_arrays_decode_to_empty_containers() -> None:
    assert len(Blocks.decode(None)) == 0
    assert len(Blocks.decode("null")) == 0
    action = ActionBlock.model_validate({"type": "actions", "elements": None})
    assert len(action.elements) == 0
    context = ContextBlock.model_validate({"type": "context", "elements": None})
    assert context.elements.to_json_value() == []


def test_invalid_utf8_blocks_fail_with_structural_error() -> None:
    with pytest.raises(StructuralError):
        Blocks.decode(b'[{"type": "divider", "x": "\xff"}]')
