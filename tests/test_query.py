"""
Unit tests for the query encoder.

Covers the three input kinds (raw text, structured record, mapping), the
value formatting rules and the failure cases.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum, IntEnum
from uuid import UUID

import pytest
from pydantic import BaseModel

from harbor_client import EncodingError, ListProjectsOptions, ListRepositoriesOptions, RawQuery, encode_query
from harbor_client.adapters.query import format_decimal, format_rfc3339


class _Filter(BaseModel):
    Name: str
    Count: int
    Ratio: float
    Since: datetime


class _Kind(str, Enum):
    ALPHA = "alpha"
    BETA = "beta"


class _Level(IntEnum):
    HIGH = 3


class _KindFilter(BaseModel):
    kind: _Kind
    level: _Level | None = None


class TestRecordEncoding:
    """Structured records: lower-cased keys, formatted scalar values."""

    def test_scalar_fields(self):
        record = _Filter(
            Name="nginx",
            Count=3,
            Ratio=0.25,
            Since=datetime(2024, 5, 1, 10, 0, 0, tzinfo=timezone.utc),
        )

        assert encode_query(record) == {
            "name": ["nginx"],
            "count": ["3"],
            "ratio": ["0.25"],
            "since": ["2024-05-01T10:00:00Z"],
        }

    def test_unset_options_are_omitted(self):
        assert encode_query(ListProjectsOptions()) == {}
        assert encode_query(ListProjectsOptions(name="library")) == {"name": ["library"]}

    def test_project_options(self):
        options = ListProjectsOptions(page=2, page_size=10, name="lib", public=True, owner="admin")

        assert encode_query(options) == {
            "page": ["2"],
            "page_size": ["10"],
            "name": ["lib"],
            "public": ["true"],
            "owner": ["admin"],
        }

    def test_false_is_sent_when_explicit(self):
        assert encode_query(ListProjectsOptions(public=False)) == {"public": ["false"]}

    def test_repository_options(self):
        options = ListRepositoriesOptions(project_id=7, q="app")

        assert encode_query(options) == {"project_id": ["7"], "q": ["app"]}

    def test_record_is_not_mutated(self):
        options = ListRepositoriesOptions(page=1, project_id=7)
        before = options.model_dump()

        encode_query(options)

        assert options.model_dump() == before


class TestMappingEncoding:
    """Dynamic mappings follow the same rules as records."""

    def test_keys_are_lower_cased(self):
        assert encode_query({"PageSize": 5, "Name": "x"}) == {"pagesize": ["5"], "name": ["x"]}

    def test_composite_values_become_json_text(self):
        params = encode_query({"labels": ["a", "b"], "meta": {"k": 1}, "flag": True, "none": None})

        assert params == {
            "labels": ['["a","b"]'],
            "meta": ['{"k":1}'],
            "flag": ["true"],
            "none": ["null"],
        }

    def test_colliding_keys_accumulate(self):
        assert encode_query({"Name": "a", "name": "b"}) == {"name": ["a", "b"]}

    def test_decimal_uses_shortest_form(self):
        assert encode_query({"ratio": Decimal("1.50"), "count": Decimal("100")}) == {
            "ratio": ["1.5"],
            "count": ["100"],
        }

    def test_non_finite_decimal_fails(self):
        with pytest.raises(EncodingError):
            encode_query({"ratio": Decimal("NaN")})

    def test_enums_are_sent_by_value(self):
        params = encode_query(_KindFilter(kind=_Kind.ALPHA, level=_Level.HIGH))

        assert params == {"kind": ["alpha"], "level": ["3"]}
        assert type(params["kind"][0]) is str

    def test_other_values_are_normalized(self):
        ident = UUID("12345678-1234-5678-1234-567812345678")

        assert encode_query({"id": ident, "kinds": [_Kind.BETA]}) == {
            "id": ["12345678-1234-5678-1234-567812345678"],
            "kinds": ['["beta"]'],
        }

    def test_dates(self):
        assert encode_query({"day": date(2024, 1, 31)}) == {"day": ["2024-01-31"]}

    def test_mapping_is_not_mutated(self):
        data = {"Name": "x", "tags": ["a"]}

        encode_query(data)

        assert data == {"Name": "x", "tags": ["a"]}

    def test_unserializable_value_fails(self):
        with pytest.raises(EncodingError):
            encode_query({"obj": object()})

    def test_non_finite_number_fails(self):
        with pytest.raises(EncodingError):
            encode_query({"ratio": float("nan")})


class TestRawQueryEncoding:
    """Raw text: JSON object of strings first, then an encoded query string."""

    def test_json_object(self):
        assert encode_query('{"name":"foo"}') == {"name": ["foo"]}

    def test_json_object_keys_kept_verbatim(self):
        assert encode_query(RawQuery('{"Name":"foo","page":"2"}')) == {"Name": ["foo"], "page": ["2"]}

    def test_query_string(self):
        assert encode_query("page=2&page_size=10") == {"page": ["2"], "page_size": ["10"]}

    def test_repeated_keys_appear_once_each(self):
        # Each parsed value is added exactly once, in order; duplicates stay distinct.
        assert encode_query("tag=a&tag=b&tag=a") == {"tag": ["a", "b", "a"]}

    def test_query_string_decoding(self):
        assert encode_query("q=lib%2Fapp&name=hello+world&empty=") == {
            "q": ["lib/app"],
            "name": ["hello world"],
            "empty": [""],
        }

    def test_json_null_values_become_empty(self):
        assert encode_query('{"name":null,"page":"2"}') == {"name": [""], "page": ["2"]}

    def test_empty_and_null_inputs(self):
        assert encode_query("") == {}
        assert encode_query("null") == {}

    @pytest.mark.parametrize("text", ["a=%zz", "a=1;b=2", "a=%ff"])
    def test_malformed_query_fails(self, text):
        with pytest.raises(EncodingError):
            encode_query(text)


class TestOtherShapes:
    @pytest.mark.parametrize("value", [5, 1.5, True, None])
    def test_scalars_give_empty_set(self, value):
        assert encode_query(value) == {}


class TestFormatting:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (2.0, "2"),
            (0.1, "0.1"),
            (123.456, "123.456"),
            (1e-07, "0.0000001"),
            (1e21, "1000000000000000000000"),
            (-3.5, "-3.5"),
        ],
    )
    def test_format_decimal(self, value, expected):
        assert format_decimal(value) == expected

    def test_rfc3339_keeps_offset_and_drops_fraction(self):
        tz = timezone(timedelta(hours=2))
        value = datetime(2024, 5, 1, 10, 0, 0, 123456, tzinfo=tz)

        assert format_rfc3339(value) == "2024-05-01T10:00:00+02:00"

    def test_rfc3339_naive_is_utc(self):
        assert format_rfc3339(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05Z"
