"""Discriminator-directed JSON decoding and encoding.

The decoder parses its input once into plain Python values, peeks each
element's `type` key to pick a model from a registry, then validates the
element into that model. Any error aborts the whole call; unrecognized
discriminators are skipped.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from typing import Any, TypeVar

from pydantic import ValidationError

from .errors import DiscriminatorError, StructuralError, VariantDecodeError
from .models import BlockModel
from .registry import TypeRegistry

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BlockModel)


def parse_json_if_needed(value: str | bytes | bytearray | Any) -> Any:
    """Parse JSON text; any other value is returned as-is.

    Raises:
        StructuralError: If the value is text but cannot be parsed as JSON
    """
    if isinstance(value, (str, bytes, bytearray)):
        try:
            return json.loads(value)
        except json.JSONDecodeError as e:
            raise StructuralError(f"Invalid JSON: {e.msg} at position {e.pos}", value) from e
        except UnicodeDecodeError as e:
            raise StructuralError(f"Invalid JSON: {e}", value) from e
    return value


def peek_discriminator(raw: Any) -> str:
    """Read the `type` field of a raw element.

    A missing or non-string `type` yields "", which no registry maps.

    Raises:
        DiscriminatorError: If the element is not a JSON object
    """
    if not isinstance(raw, dict):
        raise DiscriminatorError(
            f"Expected JSON object, got {type(raw).__name__}", raw
        )
    discriminator = raw.get("type")
    return discriminator if isinstance(discriminator, str) else ""


def decode_variant(raw: Any, registry: TypeRegistry[M]) -> M | None:
    """Decode one raw element, or return None if its type is unrecognized."""
    discriminator = peek_discriminator(raw)
    model = registry.lookup(discriminator)
    if model is None:
        logger.debug("Dropping %s with unrecognized type %r", registry.entity, discriminator)
        return None
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise VariantDecodeError(
            f"Invalid {registry.entity} of type {discriminator!r}: {e}", raw, discriminator
        ) from e


def decode_array(data: Any, registry: TypeRegistry[M]) -> list[M]:
    """Decode a JSON array of polymorphic objects.

    Args:
        data: JSON text or an already-parsed list
        registry: Registry selecting the model for each discriminator

    Returns:
        The decoded models in input order, without unrecognized elements

    Raises:
        StructuralError: If the input is not a JSON array
        DiscriminatorError: If an element is not a JSON object
        VariantDecodeError: If an element does not match its model
    """
    parsed = parse_json_if_needed(data)
    if not isinstance(parsed, list):
        raise StructuralError(
            f"Expected JSON array of {registry.entity} objects, got {type(parsed).__name__}", data
        )

    decoded: list[M] = []
    for raw in parsed:
        variant = decode_variant(raw, registry)
        if variant is not None:
            decoded.append(variant)
    return decoded


def decode_object(data: Any, registry: TypeRegistry[M]) -> M | None:
    """Decode a single polymorphic object. JSON null decodes to None."""
    parsed = parse_json_if_needed(data)
    if parsed is None:
        return None
    return decode_variant(parsed, registry)


def encode_variant(variant: BlockModel) -> dict[str, Any]:
    return variant.to_json_value()


def encode_array(variants: Iterable[BlockModel]) -> list[dict[str, Any]]:
    """Encode variants into one flat JSON-ready list, in iteration order."""
    return [encode_variant(variant) for variant in variants]


def dumps(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)
