"""Discriminator registry implementation."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Generic, Literal, TypeVar, get_args, get_origin

from .models import BlockModel

M = TypeVar("M", bound=BlockModel)


def discriminators_of(model: type[BlockModel]) -> tuple[str, ...]:
    """Return the `type` values a model accepts, read from its Literal annotation."""
    annotation = model.model_fields["type"].annotation
    if get_origin(annotation) is not Literal:
        raise TypeError(f"{model.__name__}.type must be annotated with Literal[...]")
    return tuple(get_args(annotation))


class TypeRegistry(Generic[M]):
    """Read-only mapping of discriminator strings to variant models.

    Registries are built once at import time. `extend` is the only way to
    add variants and it returns a new registry, leaving this one untouched.
    """

    def __init__(self, entity: str, variants: Mapping[str, type[M]]) -> None:
        self.entity = entity
        self._variants: Mapping[str, type[M]] = MappingProxyType(dict(variants))

    @classmethod
    def from_models(cls, entity: str, *models: type[M]) -> TypeRegistry[M]:
        variants: dict[str, type[M]] = {}
        for model in models:
            for discriminator in discriminators_of(model):
                if discriminator in variants:
                    raise ValueError(f"Duplicate {entity} discriminator: {discriminator}")
                variants[discriminator] = model
        return cls(entity, variants)

    def lookup(self, discriminator: str) -> type[M] | None:
        """Get the model for a discriminator, or None if it is unrecognized."""
        return self._variants.get(discriminator)

    def extend(self, *models: type[M]) -> TypeRegistry[M]:
        """Return a new registry with additional variant models."""
        extra = TypeRegistry.from_models(self.entity, *models)
        clashes = set(extra.discriminators()) & set(self._variants)
        if clashes:
            raise ValueError(f"Duplicate {self.entity} discriminator: {', '.join(sorted(clashes))}")
        return TypeRegistry(self.entity, {**self._variants, **extra._variants})

    def discriminators(self) -> tuple[str, ...]:
        return tuple(self._variants)

    def models(self) -> tuple[type[M], ...]:
        """Distinct registered models, in registration order."""
        return tuple(dict.fromkeys(self._variants.values()))

    def __contains__(self, discriminator: object) -> bool:
        return discriminator in self._variants

    def __iter__(self) -> Iterator[str]:
        return iter(self._variants)

    def __len__(self) -> int:
        return len(self._variants)

    def __repr__(self) -> str:
        return f"TypeRegistry({self.entity!r}, {list(self._variants)!r})"
