"""Base models shared by every block, element and composition object."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, SerializerFunctionWrapHandler, model_serializer


class JsonObject(BaseModel):
    """A JSON object that round-trips every field it was given.

    Unknown fields are kept and written back on encode, so objects sent by
    a newer server survive a decode/encode round trip. A null is written
    only when the field was explicitly set; unset optional fields are
    omitted.
    """

    model_config = ConfigDict(extra="allow")

    @model_serializer(mode="wrap")
    def _omit_unset_nulls(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        explicit = self.model_fields_set | set(self.model_extra or ())
        return {key: value for key, value in data.items() if value is not None or key in explicit}


class BlockModel(JsonObject):
    """A JSON object carrying a `type` discriminator."""

    type: str

    def to_json_value(self) -> dict[str, Any]:
        """Encode this object into a JSON-ready dict."""
        return self.model_dump(mode="json", by_alias=True)
