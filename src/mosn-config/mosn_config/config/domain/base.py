"""Shared base model and scalar types for the config schema."""

from typing import Annotated, Any, ClassVar, Self

from pydantic import (
    AliasChoices,
    BaseModel,
    Field,
    ModelWrapValidatorHandler,
    PrivateAttr,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)

from mosn_config.config.domain.duration import DurationConfig

UINT32_MAX = 0xFFFFFFFF

Uint32 = Annotated[int, Field(strict=True, ge=0, le=UINT32_MAX)]


class ConfigModel(BaseModel, frozen=True):
    """Immutable schema record; unknown keys are ignored.

    Field names are the JSON keys. A few fields also accept a capitalised
    spelling; a field read under such a key is written back under it.

    A ``null`` member is treated like an absent one and leaves the zero value,
    except on duration fields, where ``null`` is not a valid literal.

    Fields listed in ``omit_empty`` are left out of the serialised form when
    they hold their zero value; every other field is always written.
    """

    omit_empty: ClassVar[frozenset[str]] = frozenset()

    # field name -> key it was read under, where the two differ
    _source_keys: dict[str, str] = PrivateAttr(default_factory=dict)

    @model_validator(mode="wrap")
    @classmethod
    def _read_members(
        cls, data: Any, handler: ModelWrapValidatorHandler[Self]
    ) -> Self:
        if not isinstance(data, dict):
            return handler(data)
        keep_null = cls._null_rejecting_keys()
        members = {
            key: value
            for key, value in data.items()
            if value is not None or key in keep_null
        }
        model = handler(members)
        model._source_keys = cls._alternate_keys(members)
        return model

    @classmethod
    def _accepted_keys(cls, name: str) -> list[str]:
        alias = cls.model_fields[name].validation_alias
        if isinstance(alias, AliasChoices):
            return [choice for choice in alias.choices if isinstance(choice, str)]
        return [name]

    @classmethod
    def _null_rejecting_keys(cls) -> set[str]:
        return {
            key
            for name, info in cls.model_fields.items()
            if info.annotation is DurationConfig
            for key in cls._accepted_keys(name)
        }

    @classmethod
    def _alternate_keys(cls, members: dict[str, Any]) -> dict[str, str]:
        found: dict[str, str] = {}
        for name in cls.model_fields:
            # the first accepted key present wins, as in validation
            key = next((k for k in cls._accepted_keys(name) if k in members), name)
            if key != name:
                found[name] = key
        return found

    @model_serializer(mode="wrap")
    def _drop_empty_fields(
        self, handler: SerializerFunctionWrapHandler
    ) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)
        for key in self.omit_empty:
            if key in data and _is_empty(data[key]):
                del data[key]
        return {self._source_keys.get(key, key): value for key, value in data.items()}


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return value is False
    if isinstance(value, int | float):
        return value == 0
    return value in ("", [], {})
