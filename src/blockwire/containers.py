"""Per-kind bucket containers for heterogeneous variant sequences."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any, ClassVar, Generic, Self, TypeVar

from pydantic import BaseModel, GetCoreSchemaHandler
from pydantic_core import core_schema

from .codec import decode_array, dumps, encode_array, parse_json_if_needed
from .models import BlockModel
from .registry import TypeRegistry

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BlockModel)


class PydanticCodec(ABC):
    """Mixin plugging a container into pydantic validation and serialization.

    Subclasses provide `decode(value)` and `to_json_value()`. A field typed
    with the container accepts an instance, raw JSON values, or a list of
    already-built variant models.
    """

    @classmethod
    @abstractmethod
    def decode(cls, data: Any) -> Self:
        """Build a container from raw JSON values or JSON text."""

    @abstractmethod
    def to_json_value(self) -> Any:
        """Encode the container into JSON-ready values."""

    @classmethod
    def _coerce(cls, value: Any) -> Self:
        if isinstance(value, cls):
            return value
        return cls.decode(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.to_json_value(), when_used="always"
            ),
        )


class VariantBuckets(PydanticCodec, Generic[M]):
    """Base for containers that keep one list per variant kind.

    Subclasses are dataclasses declaring one list field per bucket, plus:

    - `registry`: the registry used when decoding
    - `buckets`: (field name, model) pairs in encode order

    Every model of the registry must be covered by a bucket; this is checked
    when the subclass is defined.
    """

    registry: ClassVar[TypeRegistry[Any]]
    buckets: ClassVar[tuple[tuple[str, type[BlockModel]], ...]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        covered = tuple(kind for _, kind in cls.buckets)
        missing = [
            model.__name__ for model in cls.registry.models() if not issubclass(model, covered)
        ]
        if missing:
            raise TypeError(f"{cls.__name__} has no bucket for: {', '.join(missing)}")

    @classmethod
    def decode(cls, data: Any) -> Self:
        """Decode a JSON array into a new container.

        A list of already-built models is routed through `append` instead.
        JSON null decodes to an empty container.
        """
        if isinstance(data, (list, tuple)) and data and all(isinstance(v, BaseModel) for v in data):
            return cls().append(*data)
        parsed = parse_json_if_needed(data)
        if parsed is None:
            return cls()
        return cls().append(*decode_array(parsed, cls.registry))

    def append(self, *variants: Any) -> Self:
        """Route each variant into its bucket. Unknown objects are ignored."""
        for variant in variants:
            bucket = self._bucket_for(variant)
            if bucket is None:
                logger.debug("Ignoring %s appended to %s", type(variant).__name__, type(self).__name__)
                continue
            bucket.append(variant)
        return self

    def _bucket_for(self, variant: Any) -> list[Any] | None:
        for name, kind in self.buckets:
            if isinstance(variant, kind):
                return getattr(self, name)
        return None

    def __iter__(self) -> Iterator[M]:
        for name, _ in self.buckets:
            yield from getattr(self, name)

    def __len__(self) -> int:
        return sum(len(getattr(self, name)) for name, _ in self.buckets)

    def to_json_value(self) -> list[dict[str, Any]]:
        """Encode all buckets as one flat JSON-ready list, in bucket order."""
        return encode_array(self)

    def to_json(self) -> str:
        return dumps(self.to_json_value())
