"""Write options value object.

Every write accepts one optional argument describing expiration. Callers may
pass a bare number of seconds or a ``WriteOptions``; ``WriteOptions.coerce``
is the single place where that argument is normalized.

TTL semantics:
    - None or 0: store without expiration (reported as -1 by ``ttl``)
    - n > 0: expire after n seconds

Usage:
    await cache.set("foo", "bar", WriteOptions(ttl_seconds=60))
    await cache.set("foo", "bar", 60)  # same thing
    await cache.set("foo", "bar", 0)   # no expiration
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class WriteOptions:
    """Options applied to a single write (value object).

    Attributes:
        ttl_seconds: Seconds until expiration. None or 0 means no expiration.

    Raises:
        ValueError: If ttl_seconds is negative or not an integer.
    """

    ttl_seconds: int | None = None

    def __post_init__(self) -> None:
        """Validate TTL after initialization.

        Raises:
            ValueError: If ttl_seconds is invalid.
        """
        if self.ttl_seconds is None:
            return
        if isinstance(self.ttl_seconds, bool) or not isinstance(self.ttl_seconds, int):
            raise ValueError(
                f"ttl_seconds must be an integer, got {type(self.ttl_seconds).__name__}"
            )
        if self.ttl_seconds < 0:
            raise ValueError(f"ttl_seconds must be >= 0, got {self.ttl_seconds}")

    @property
    def expires(self) -> bool:
        """True when the write must carry an expiration."""
        return bool(self.ttl_seconds)

    @property
    def expire_seconds(self) -> int | None:
        """Expiration to send to the store (None = persist)."""
        return self.ttl_seconds if self.expires else None

    @classmethod
    def coerce(cls, options: "WriteOptions | int | None") -> "WriteOptions":
        """Normalize a TTL argument into WriteOptions.

        Args:
            options: WriteOptions, bare TTL seconds, or None.

        Returns:
            WriteOptions instance.

        Raises:
            ValueError: If the argument has an unsupported shape or bad TTL.
        """
        if options is None:
            return cls()
        if isinstance(options, WriteOptions):
            return options
        if isinstance(options, int) and not isinstance(options, bool):
            return cls(ttl_seconds=options)
        raise ValueError(
            f"Expected WriteOptions or int TTL, got {type(options).__name__}"
        )


# Accepted shapes for the TTL argument of set/mset
type TTLArgument = WriteOptions | int | None
