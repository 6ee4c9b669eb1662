"""Infrastructure layer: Redis-backed adapters and logging."""
