"""Extração do body da requisição a partir de um payload arbitrário.

Variantes aceitas, verificadas nesta ordem:
- None -> body vazio
- bytes/bytearray/memoryview -> bytes inalterados (JSON já serializado)
- str -> bytes UTF-8, sem aspas nem escape
- registro (BaseModel, dataclass, Mapping) ou sequência de registros -> JSON compacto

Qualquer outro formato é rejeitado com UnsupportedPayloadTypeError.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_json

from wacloud.http.errors import PayloadEncodingError, UnsupportedPayloadTypeError


def _is_record(value: Any) -> bool:
    if isinstance(value, (BaseModel, Mapping)):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _is_record_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple)) and all(_is_record(item) for item in value)


def encode_json(value: Any) -> bytes:
    """Serializa registro(s) em JSON compacto, preservando ordem dos campos."""
    if isinstance(value, Mapping) and not isinstance(value, dict):
        value = dict(value)
    try:
        encoded = to_json(value, by_alias=True, exclude_none=True)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise PayloadEncodingError(f"payload_encoding_failed: {exc}") from exc
    # Alguns encoders terminam com newline; o body precisa ser byte-exato.
    return encoded.rstrip(b"\n")


def extract_body(payload: Any) -> bytes:
    """Converte o payload em bytes prontos para envio.

    Args:
        payload: Valor a enviar como body.

    Returns:
        Bytes do body (vazio se payload for None).

    Raises:
        UnsupportedPayloadTypeError: Se o formato do payload não é suportado.
        PayloadEncodingError: Se a serialização JSON falhar.
    """
    if payload is None:
        return b""
    if isinstance(payload, bytes):
        return payload
    if isinstance(payload, (bytearray, memoryview)):
        return bytes(payload)
    if isinstance(payload, str):
        return payload.encode("utf-8")
    if _is_record(payload) or _is_record_sequence(payload):
        return encode_json(payload)
    raise UnsupportedPayloadTypeError(type(payload).__name__)
