"""Encoder de query params.

Convierte un valor de opciones en un conjunto de parámetros multi-valor
(`dict[str, list[str]]`). La forma de entrada se elige por tipo:

- `RawQuery` / `str`: objeto JSON de strings o query ya codificada.
- Modelo pydantic: registro estructurado; los campos `None` no se envían.
- `Mapping`: diccionario dinámico.
- Cualquier otra cosa (número, bool, None): conjunto vacío, no es error.

Reglas de formato para registros y mappings:
- La clave se pasa a minúsculas.
- str tal cual (los Enum se envían por su valor); números, incluido
  `Decimal`, en decimal mínimo sin exponente; datetime en RFC 3339.
- El resto se normaliza a tipos JSON; listas, dicts y bools van como texto
  JSON compacto.

El encoder nunca muta su entrada.
"""

from __future__ import annotations

import json
import math
import numbers
import re
from collections.abc import Mapping
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from functools import singledispatch
from typing import Any
from urllib.parse import parse_qsl

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python

from harbor_client.core.domain.options import RawQuery
from harbor_client.core.errors import EncodingError

QueryParams = dict[str, list[str]]

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_NOT_JSON = object()


@singledispatch
def encode_query(value: Any) -> QueryParams:
    """Codifica `value` como query params según su forma."""

    return {}


@encode_query.register
def _(value: RawQuery) -> QueryParams:
    return encode_raw_query(value.text)


@encode_query.register
def _(value: str) -> QueryParams:
    return encode_raw_query(value)


@encode_query.register
def _(value: BaseModel) -> QueryParams:
    return encode_record(value)


@encode_query.register
def _(value: Mapping) -> QueryParams:
    return encode_mapping(value)


def encode_record(record: BaseModel) -> QueryParams:
    """Registro estructurado -> query params.

    Usa los alias del modelo como nombre de campo y descarta los `None`
    (campos opcionales no informados).
    """

    try:
        data = record.model_dump(by_alias=True, exclude_none=True)
    except PydanticSerializationError as exc:
        raise EncodingError(
            f"cannot serialize {type(record).__name__} as query",
            details={"type": type(record).__name__},
        ) from exc
    return encode_mapping(data)


def encode_mapping(data: Mapping[str, Any]) -> QueryParams:
    params: QueryParams = {}
    for key, value in data.items():
        params.setdefault(str(key).lower(), []).append(format_query_value(value))
    return params


def encode_raw_query(text: str) -> QueryParams:
    """Texto crudo -> query params.

    Primero intenta un objeto JSON de strings (`{"name": "foo"}`); si no lo es,
    lo interpreta como query codificada (`page=2&page_size=10`). Las claves se
    mantienen tal cual en ambos casos.
    """

    parsed = _load_json(text)
    if parsed is None:
        return {}
    if isinstance(parsed, dict) and all(v is None or isinstance(v, str) for v in parsed.values()):
        # null dentro del objeto cuenta como string vacío.
        params: QueryParams = {}
        for key, value in parsed.items():
            params.setdefault(key, []).append(value if value is not None else "")
        return params
    return _parse_query_string(text)


def format_query_value(value: Any) -> str:
    # Enum primero (str/int subclase) y bool antes que int.
    if isinstance(value, Enum):
        return format_query_value(value.value)
    if isinstance(value, str):
        return str.__str__(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return int.__repr__(value)
    if isinstance(value, float):
        return format_decimal(float(value))
    if isinstance(value, Decimal):
        return _format_exact_decimal(value)
    if isinstance(value, numbers.Real):
        return format_decimal(float(value))
    if isinstance(value, datetime):
        return format_rfc3339(value)
    if isinstance(value, date):
        return value.isoformat()

    normalized = _to_jsonable(value)
    if isinstance(normalized, (str, int, float)):
        return format_query_value(normalized)
    return _json_text(normalized)


def format_decimal(value: float) -> str:
    """Decimal más corto que reproduce el float, sin exponente ni `.0` final."""

    if not math.isfinite(value):
        raise EncodingError(f"non-finite number cannot be encoded: {value!r}")
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def _format_exact_decimal(value: Decimal) -> str:
    if not value.is_finite():
        raise EncodingError(f"non-finite number cannot be encoded: {value!r}")
    return format(value.normalize(), "f")


def format_rfc3339(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    text = value.replace(microsecond=0).isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


def _json_text(value: Any) -> str:
    try:
        return json.dumps(
            to_jsonable_python(value),
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise EncodingError(
            f"cannot encode value of type {type(value).__name__} as query",
            details={"type": type(value).__name__},
        ) from exc


def _to_jsonable(value: Any) -> Any:
    # UUID, Path, sets, modelos anidados... a tipos JSON planos.
    try:
        return to_jsonable_python(value)
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise EncodingError(
            f"cannot encode value of type {type(value).__name__} as query",
            details={"type": type(value).__name__},
        ) from exc


def _load_json(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return _NOT_JSON


def _parse_query_string(text: str) -> QueryParams:
    if ";" in text:
        raise EncodingError("invalid semicolon separator in query", details={"query": text})
    if _BAD_ESCAPE.search(text):
        raise EncodingError("invalid URL escape in query", details={"query": text})
    try:
        pairs = parse_qsl(text, keep_blank_values=True, errors="strict")
    except (UnicodeDecodeError, ValueError) as exc:
        raise EncodingError("query is not valid UTF-8", details={"query": text}) from exc

    params: QueryParams = {}
    for key, value in pairs:
        params.setdefault(key, []).append(value)
    return params
