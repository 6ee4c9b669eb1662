"""Unit tests for WriteOptions (TTL normalization)."""

import pytest

from redis_cache_store.domain.value_objects import WriteOptions


@pytest.mark.unit
class TestWriteOptions:
    """Construction and validation."""

    def test_defaults_to_no_expiration(self):
        options = WriteOptions()

        assert options.ttl_seconds is None
        assert options.expires is False
        assert options.expire_seconds is None

    def test_zero_means_no_expiration(self):
        options = WriteOptions(ttl_seconds=0)

        assert options.expires is False
        assert options.expire_seconds is None

    def test_positive_ttl_expires(self):
        options = WriteOptions(ttl_seconds=60)

        assert options.expires is True
        assert options.expire_seconds == 60

    def test_negative_ttl_rejected(self):
        with pytest.raises(ValueError, match="must be >= 0"):
            WriteOptions(ttl_seconds=-1)

    @pytest.mark.parametrize("bad", [1.5, "60", True])
    def test_non_integer_ttl_rejected(self, bad):
        with pytest.raises(ValueError, match="must be an integer"):
            WriteOptions(ttl_seconds=bad)

    def test_immutable(self):
        options = WriteOptions(ttl_seconds=5)

        with pytest.raises(AttributeError):
            options.ttl_seconds = 10  # type: ignore[misc]


@pytest.mark.unit
class TestWriteOptionsCoerce:
    """Single normalization step for TTL arguments."""

    def test_none_becomes_default_options(self):
        assert WriteOptions.coerce(None) == WriteOptions()

    def test_int_becomes_options(self):
        assert WriteOptions.coerce(30) == WriteOptions(ttl_seconds=30)

    def test_options_pass_through(self):
        options = WriteOptions(ttl_seconds=30)

        assert WriteOptions.coerce(options) is options

    @pytest.mark.parametrize("bad", [{"ttl": 5}, "5", 5.0, True])
    def test_other_shapes_rejected(self, bad):
        with pytest.raises(ValueError):
            WriteOptions.coerce(bad)
