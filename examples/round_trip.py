from __future__ import annotations

import json
import logging

from blockwire import (
    Accessory,
    ActionBlock,
    BlockElements,
    ButtonBlockElement,
    DividerBlock,
    Message,
    SectionBlock,
    TextBlockObject,
    add_block_message,
    new_block_message,
)

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

INBOUND = """
{
  "text": "Deploy finished",
  "blocks": [
    {"type": "header", "text": {"type": "plain_text", "text": "Deploy"}},
    {"type": "section", "text": {"type": "mrkdwn", "text": "*api* is live"},
     "accessory": {"type": "button", "text": {"type": "plain_text", "text": "Logs"}, "url": "https://example.com/logs"}},
    {"type": "context", "elements": [
      {"type": "mrkdwn", "text": "by @ops"},
      {"type": "image", "image_url": "https://example.com/ops.png", "alt_text": "ops"}
    ]}
  ]
}
"""


def build_outbound() -> Message:
    approve = ButtonBlockElement(text=TextBlockObject.plain("Approve"), action_id="approve", style="primary")
    deny = ButtonBlockElement(text=TextBlockObject.plain("Deny"), action_id="deny", style="danger")
    message = new_block_message(
        SectionBlock(text=TextBlockObject.markdown("Release *v2.1* is ready")),
        ActionBlock(elements=BlockElements().append(approve, deny)),
    )
    return add_block_message(message, DividerBlock())


if __name__ == "__main__":
    # The header block is not a known kind and is dropped on decode.
    inbound = Message.model_validate_json(INBOUND)
    section = inbound.blocks.section_blocks[0]
    print("accessory:", Accessory.decode(section.accessory.to_json_value()).element)
    print("context:", inbound.blocks.context_blocks[0].elements.to_json())
    print(json.dumps(inbound.to_json_value(), indent=2))

    print(json.dumps(build_outbound().to_json_value(), indent=2))
