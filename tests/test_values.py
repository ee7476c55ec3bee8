"""Tests for values.py."""

import pytest
from juiceconfig.values import (
    INT64_MAX,
    INT64_MIN,
    JsonType,
    ValueKind,
    json_type_of,
    matches_kind,
)


class TestJsonTypeOf:
    """Tests for json_type_of."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("text", JsonType.STRING),
            (42, JsonType.INTEGER),
            (4.2, JsonType.NUMBER),
            (True, JsonType.BOOLEAN),
            (False, JsonType.BOOLEAN),
            (None, JsonType.NULL),
            ([1, 2], JsonType.ARRAY),
            ({"a": 1}, JsonType.OBJECT),
        ],
    )
    def test_classifies(self, value, expected):
        """Each JSON value maps to exactly one type."""
        assert json_type_of(value) is expected

    def test_rejects_non_json(self):
        """Objects json.loads never produces are rejected."""
        with pytest.raises(TypeError):
            json_type_of(object())


class TestMatchesKind:
    """Tests for matches_kind."""

    def test_bool_is_not_int(self):
        """Booleans do not satisfy int lookups."""
        assert matches_kind(True, ValueKind.INT) is False
        assert matches_kind(True, ValueKind.BOOL) is True

    def test_int_is_not_bool(self):
        """Integers do not satisfy bool lookups."""
        assert matches_kind(1, ValueKind.BOOL) is False

    def test_float_is_not_int(self):
        """Floats, even whole ones, do not satisfy int lookups."""
        assert matches_kind(5.0, ValueKind.INT) is False

    def test_int64_range(self):
        """Integers outside the signed 64-bit range are rejected."""
        assert matches_kind(INT64_MAX, ValueKind.INT) is True
        assert matches_kind(INT64_MIN, ValueKind.INT) is True
        assert matches_kind(INT64_MAX + 1, ValueKind.INT) is False
        assert matches_kind(INT64_MIN - 1, ValueKind.INT) is False

    def test_string(self):
        """Only strings satisfy string lookups."""
        assert matches_kind("5432", ValueKind.STRING) is True
        assert matches_kind(5432, ValueKind.STRING) is False
        assert matches_kind(None, ValueKind.STRING) is False

    def test_accepts_kind_names(self):
        """Plain strings naming a kind are accepted."""
        assert matches_kind("x", "string") is True

    def test_unknown_kind(self):
        """Unknown kind names raise ValueError."""
        with pytest.raises(ValueError):
            matches_kind("x", "float")
