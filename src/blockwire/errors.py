"""Error types for block (de)serialization."""

from __future__ import annotations


class BlockCodecError(ValueError):
    """Error raised when a block payload cannot be decoded.

    This error preserves the raw value for debugging purposes. It derives
    from ValueError so that pydantic reports it as a validation error when
    a container is decoded as a field of an enclosing model.
    """

    def __init__(self, message: str, raw_value: object) -> None:
        self.raw_value = raw_value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({super().__repr__()}, raw_value={self.raw_value!r})"


class StructuralError(BlockCodecError):
    """The outer value is not a JSON array where one is required."""


class DiscriminatorError(BlockCodecError):
    """An array element is not a JSON object, so no `type` can be read."""


class VariantDecodeError(BlockCodecError):
    """A recognized variant's payload does not match its model."""

    def __init__(self, message: str, raw_value: object, discriminator: str) -> None:
        self.discriminator = discriminator
        super().__init__(message, raw_value)
