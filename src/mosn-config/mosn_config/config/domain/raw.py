"""RawResources: a JSON sub-document kept as unparsed text for its owner."""

import json
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel, GetCoreSchemaHandler, JsonValue
from pydantic_core import core_schema

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class RawResources:
    """Verbatim JSON text of a section this package does not interpret.

    The text is kept exactly as it appeared in the source document so that
    re-serialising the config reproduces it byte for byte. Owners decode it
    later with their own schema via ``decode_as`` or ``value``; failures at
    that point are theirs, not the loader's.
    """

    text: str

    @classmethod
    def from_value(cls, value: JsonValue) -> "RawResources":
        return cls(json.dumps(value, separators=(",", ":"), ensure_ascii=False))

    def as_bytes(self) -> bytes:
        return self.text.encode("utf-8")

    def value(self) -> JsonValue:
        return json.loads(self.text)

    def decode_as(self, model: type[M]) -> M:
        return model.model_validate_json(self.text)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _coerce_raw,
            serialization=core_schema.plain_serializer_function_ser_schema(
                RawResources.value, when_used="json"
            ),
        )


def _coerce_raw(value: Any) -> RawResources:
    """Keep JSON text (str/bytes) as-is once it parses; encode anything else."""
    if isinstance(value, RawResources):
        return value
    if isinstance(value, bytes):
        value = value.decode("utf-8")
    if isinstance(value, str):
        json.loads(value)
        return RawResources(value)
    return RawResources.from_value(value)
