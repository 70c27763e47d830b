"""Testes para wacloud.http.body (extração do body)."""

from __future__ import annotations

import asyncio
import json
from collections import OrderedDict
from dataclasses import dataclass
from types import MappingProxyType

import pytest
from pydantic import BaseModel, Field

from wacloud.http.body import extract_body
from wacloud.http.errors import PayloadEncodingError, UnsupportedPayloadTypeError


@dataclass
class User:
    name: str
    age: int
    wise: bool


class UserModel(BaseModel):
    name: str
    age: int
    wise: bool


class AliasedModel(BaseModel):
    product: str = Field(serialization_alias="messaging_product")
    note: str | None = None


class TestExtractBodyRawVariants:
    """None, bytes e str passam sem serialização."""

    def test_none_payload_is_empty(self) -> None:
        assert extract_body(None) == b""

    def test_bytes_payload_is_unchanged(self) -> None:
        raw = b'{"messaging_product":"whatsapp"}'
        assert extract_body(raw) is raw

    def test_bytearray_and_memoryview(self) -> None:
        assert extract_body(bytearray(b"test")) == b"test"
        assert extract_body(memoryview(b"test")) == b"test"

    def test_string_payload(self) -> None:
        assert extract_body("test") == b"test"

    def test_string_is_not_quoted_or_escaped(self) -> None:
        """Texto vai como está, sem aspas extras nem escape."""
        assert extract_body('say "hi"\n') == b'say "hi"\n'

    def test_string_is_utf8(self) -> None:
        assert extract_body("olá 🎉") == "olá 🎉".encode()


class TestExtractBodyRecords:
    """Registros viram JSON compacto na ordem dos campos."""

    def test_dataclass_payload(self) -> None:
        body = extract_body(User(name="test", age=10, wise=True))
        assert body == b'{"name":"test","age":10,"wise":true}'

    def test_pydantic_payload(self) -> None:
        body = extract_body(UserModel(name="test", age=10, wise=True))
        assert body == b'{"name":"test","age":10,"wise":true}'

    def test_mapping_payload(self) -> None:
        assert extract_body({"name": "test", "age": 10}) == b'{"name":"test","age":10}'
        assert extract_body(OrderedDict(a=1)) == b'{"a":1}'
        assert extract_body(MappingProxyType({"a": 1})) == b'{"a":1}'

    def test_list_of_records(self) -> None:
        users = [
            User(name="test", age=10, wise=True),
            User(name="test2", age=20, wise=False),
        ]
        assert extract_body(users) == (
            b'[{"name":"test","age":10,"wise":true},'
            b'{"name":"test2","age":20,"wise":false}]'
        )

    def test_tuple_of_models(self) -> None:
        users = (
            UserModel(name="test", age=10, wise=True),
            UserModel(name="test2", age=20, wise=False),
        )
        assert extract_body(users) == (
            b'[{"name":"test","age":10,"wise":true},'
            b'{"name":"test2","age":20,"wise":false}]'
        )

    def test_empty_list_is_json_array(self) -> None:
        assert extract_body([]) == b"[]"

    def test_no_trailing_newline(self) -> None:
        assert not extract_body(User(name="x", age=1, wise=False)).endswith(b"\n")

    def test_aliases_are_used_and_none_omitted(self) -> None:
        body = extract_body(AliasedModel(product="whatsapp"))
        assert body == b'{"messaging_product":"whatsapp"}'

    def test_record_round_trip(self) -> None:
        """JSON do registro decodifica de volta no mesmo valor."""
        original = User(name="Pius Alfred", age=77, wise=True)
        decoded = User(**json.loads(extract_body(original)))
        assert decoded == original

        model = UserModel(name="test", age=10, wise=True)
        assert UserModel.model_validate_json(extract_body(model)) == model


class TestExtractBodyUnsupported:
    """Formatos fora das variantes suportadas são rejeitados."""

    @pytest.mark.parametrize(
        ("payload", "type_name"),
        [
            (42, "int"),
            (3.14, "float"),
            (True, "bool"),
            (lambda: None, "function"),
            ({1, 2}, "set"),
            ([1, 2], "list"),
            ([User(name="a", age=1, wise=True), "b"], "list"),
        ],
    )
    def test_unsupported_payload(self, payload: object, type_name: str) -> None:
        with pytest.raises(UnsupportedPayloadTypeError) as exc_info:
            extract_body(payload)
        assert exc_info.value.payload_type == type_name
        assert type_name in str(exc_info.value)

    def test_queue_payload_is_unsupported(self) -> None:
        """Equivalente a um canal: não serializável."""
        with pytest.raises(UnsupportedPayloadTypeError, match="Queue"):
            extract_body(asyncio.Queue())

    def test_unsupported_is_encoding_error(self) -> None:
        with pytest.raises(PayloadEncodingError):
            extract_body(object())

    def test_unserializable_nested_value(self) -> None:
        """Registro com valor não serializável falha como PayloadEncodingError."""
        with pytest.raises(PayloadEncodingError) as exc_info:
            extract_body({"callback": object()})
        assert not isinstance(exc_info.value, UnsupportedPayloadTypeError)
