"""Unit tests for JsonCodec (stored value encoding)."""

import pytest

from redis_cache_store.domain.value_objects import Absent
from redis_cache_store.infrastructure.cache.codec import ABSENT_WIRE_VALUE, JsonCodec


@pytest.fixture
def codec():
    return JsonCodec()


@pytest.mark.unit
class TestEncode:
    """encode()"""

    def test_absent_uses_bare_token(self, codec):
        assert codec.encode(Absent.ABSENT) == ABSENT_WIRE_VALUE == "undefined"

    def test_string_undefined_is_quoted(self, codec):
        assert codec.encode("undefined") == '"undefined"'

    def test_structured_value(self, codec):
        assert codec.encode({"a": [1, 2]}) == '{"a": [1, 2]}'

    def test_none_is_null(self, codec):
        assert codec.encode(None) == "null"

    def test_unserializable_raises(self, codec):
        with pytest.raises(TypeError):
            codec.encode(object())

    def test_nan_raises(self, codec):
        with pytest.raises(ValueError):
            codec.encode(float("nan"))

    @pytest.mark.parametrize(
        "value",
        [
            ("a", 1),
            {"pair": ("a", 1)},
            [1, [2, (3,)]],
            {1: "a"},
            {"outer": {2: "b"}},
            [{None: 0}],
        ],
    )
    def test_values_that_change_on_read_back_raise(self, codec, value):
        with pytest.raises(TypeError):
            codec.encode(value)

    def test_circular_reference_raises(self, codec):
        loop = []
        loop.append(loop)

        with pytest.raises(ValueError):
            codec.encode(loop)

    def test_shared_subvalue_is_not_circular(self, codec):
        shared = {"k": 1}

        assert codec.encode([shared, shared]) == '[{"k": 1}, {"k": 1}]'


@pytest.mark.unit
class TestDecode:
    """decode()"""

    def test_missing_is_absent(self, codec):
        assert codec.decode(None) is Absent.ABSENT

    def test_absent_token_is_absent(self, codec):
        assert codec.decode(b"undefined") is Absent.ABSENT
        assert codec.decode("undefined") is Absent.ABSENT

    def test_quoted_undefined_is_string(self, codec):
        assert codec.decode(b'"undefined"') == "undefined"

    def test_bytes_and_str(self, codec):
        assert codec.decode(b'{"a": 1}') == {"a": 1}
        assert codec.decode('{"a": 1}') == {"a": 1}

    def test_falsy_values_stay_present(self, codec):
        assert codec.decode(b"0") == 0
        assert codec.decode(b'""') == ""
        assert codec.decode(b"false") is False
        assert codec.decode(b"null") is None

    @pytest.mark.parametrize("native", [42, 1.5, {"a": 1}, [1, 2]])
    def test_native_values_pass_through(self, codec, native):
        assert codec.decode(native) == native

    def test_invalid_json_raises(self, codec):
        with pytest.raises(ValueError):
            codec.decode(b"not json {]")

    def test_decode_key(self, codec):
        assert codec.decode_key(b"user:1") == "user:1"
        assert codec.decode_key("user:1") == "user:1"
