"""Tests for RawResources — unparsed sub-documents deferred to their owners."""

import pytest
from pydantic import BaseModel, ValidationError

from mosn_config.config.domain.config import MosnConfig
from mosn_config.config.domain.raw import RawResources


class _ListenerResource(BaseModel):
    name: str
    port: int


class _StaticResources(BaseModel):
    listeners: list[_ListenerResource]


class TestRawResources:
    def test_text_is_kept_verbatim(self) -> None:
        raw = RawResources('{ "a" : [1,  2] }')
        assert raw.text == '{ "a" : [1,  2] }'

    def test_value_reparses_text(self) -> None:
        assert RawResources('{"a":{"b":[1,2,3]}}').value() == {"a": {"b": [1, 2, 3]}}

    def test_as_bytes_is_utf8(self) -> None:
        assert RawResources('{"n":"héllo"}').as_bytes() == '{"n":"héllo"}'.encode()

    def test_from_value_is_compact(self) -> None:
        assert RawResources.from_value({"a": [1, 2]}).text == '{"a":[1,2]}'

    def test_decode_as_downstream_schema(self) -> None:
        raw = RawResources('{"listeners": [{"name": "egress", "port": 15001}]}')

        resources = raw.decode_as(_StaticResources)

        assert resources.listeners[0].name == "egress"
        assert resources.listeners[0].port == 15001

    def test_decode_as_failure_belongs_to_caller(self) -> None:
        raw = RawResources('{"listeners": [{"name": "egress"}]}')
        with pytest.raises(ValidationError):
            raw.decode_as(_StaticResources)


class TestRawResourcesField:
    """How the root model accepts raw sections built in Python."""

    def test_json_text_is_wrapped_as_is(self) -> None:
        cfg = MosnConfig.model_validate({"dynamic_resources": '{"x": 1}'})

        assert cfg.dynamic_resources == RawResources('{"x": 1}')

    def test_bytes_are_wrapped_as_text(self) -> None:
        cfg = MosnConfig.model_validate({"static_resources": b"[1, 2]"})

        assert cfg.static_resources is not None
        assert cfg.static_resources.text == "[1, 2]"

    def test_plain_value_is_encoded(self) -> None:
        cfg = MosnConfig.model_validate({"dynamic_resources": {"x": [True, None]}})

        assert cfg.dynamic_resources is not None
        assert cfg.dynamic_resources.value() == {"x": [True, None]}

    def test_invalid_json_text_raises(self) -> None:
        with pytest.raises(ValidationError):
            MosnConfig.model_validate({"dynamic_resources": "{not json"})

    def test_json_mode_dump_emits_parsed_value(self) -> None:
        cfg = MosnConfig(dynamic_resources=RawResources('{"x": 1}'))

        assert cfg.model_dump(mode="json")["dynamic_resources"] == {"x": 1}
