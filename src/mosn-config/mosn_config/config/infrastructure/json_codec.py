"""JSON codec for MosnConfig: typed decode with raw-section capture, and back."""

import json
from json.decoder import scanstring
from typing import Any

from pydantic import ValidationError

from mosn_config.config.domain.config import RAW_RESOURCE_KEYS, MosnConfig
from mosn_config.config.domain.raw import RawResources
from mosn_config.config.infrastructure.errors import ConfigDecodeError

_WHITESPACE = " \t\n\r"
_DECODER = json.JSONDecoder()


def decode_config(content: bytes | str) -> MosnConfig:
    """
    Decode a JSON document into a MosnConfig.

    The source text of ``dynamic_resources`` and ``static_resources`` is
    captured verbatim; everything else is validated against the schema.
    Unknown keys are ignored.

    Raises:
        ConfigDecodeError: if the text is not UTF-8, not a JSON object, or any
            field fails validation (including an invalid duration literal).
            Nothing is returned on failure.
    """
    text = _decode_text(content=content)
    data = _parse_document(text=text)
    raw_members = _capture_raw_members(text=text, keys=RAW_RESOURCE_KEYS)
    return _build_config(data={**data, **raw_members})


def encode_config(config: MosnConfig, indent: int | None = None) -> str:
    """
    Serialise a MosnConfig back to JSON text.

    Typed fields are written under the keys they are read from; raw resource
    sections are written back exactly as they were captured.
    """
    typed = config.model_dump(mode="json", exclude=set(RAW_RESOURCE_KEYS))
    members = [(key, _dump_value(value, indent)) for key, value in typed.items()]
    for key in RAW_RESOURCE_KEYS:
        raw: RawResources | None = getattr(config, key)
        if raw is not None:
            members.append((key, raw.text))
    return _render_object(members=members, indent=indent)


def _decode_text(content: bytes | str) -> str:
    if isinstance(content, str):
        return content
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigDecodeError(f"invalid UTF-8: {exc}") from exc


def _parse_document(text: str) -> dict[str, Any]:
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        raise ConfigDecodeError(f"invalid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigDecodeError(
            f"expected a JSON object at top level, got {type(data).__name__}"
        )
    return data


def _reject_constant(name: str) -> Any:
    raise ValueError(f"unsupported constant {name}")


def _capture_raw_members(
    text: str, keys: tuple[str, ...]
) -> dict[str, RawResources]:
    """
    Walk the top-level object and return the source slice of each wanted member.

    Assumes ``text`` already parsed as a JSON object. A repeated key keeps its
    last occurrence, matching ``json.loads``.
    """
    captured: dict[str, RawResources] = {}
    pos = _skip_whitespace(text, 0) + 1
    while True:
        pos = _skip_whitespace(text, pos)
        if text[pos] == "}":
            return captured
        key, pos = scanstring(text, pos + 1)
        pos = _skip_whitespace(text, pos) + 1
        start = _skip_whitespace(text, pos)
        _, end = _DECODER.raw_decode(text, start)
        if key in keys:
            captured[key] = RawResources(text[start:end])
        pos = _skip_whitespace(text, end)
        if text[pos] == ",":
            pos += 1


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    return pos


def _build_config(data: dict[str, Any]) -> MosnConfig:
    try:
        return MosnConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigDecodeError(str(exc)) from exc


def _dump_value(value: Any, indent: int | None) -> str:
    if indent is None:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    text = json.dumps(value, indent=indent, ensure_ascii=False)
    # json.dumps escapes newlines inside strings, so every newline is structural
    return text.replace("\n", "\n" + " " * indent)


def _render_object(members: list[tuple[str, str]], indent: int | None) -> str:
    if indent is None:
        body = ",".join(f"{json.dumps(key)}:{value}" for key, value in members)
        return "{" + body + "}"
    if not members:
        return "{}"
    pad = " " * indent
    body = ",\n".join(f"{pad}{json.dumps(key)}: {value}" for key, value in members)
    return "{\n" + body + "\n}"
