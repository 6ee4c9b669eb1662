"""Domain layer: cache contract, value objects and cacheability rules.

Nothing in this package talks to Redis.
"""
