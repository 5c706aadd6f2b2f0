"""
project: PCG Maps
module: errors.py
License: MIT

Exceptions raised while turning env vars / CLI flags into generator configs.
Generation passes themselves never raise: they clamp.
"""


class PCGError(Exception):
    """Base class for toolkit errors."""


class ConfigError(PCGError, ValueError):
    """A configuration value is malformed or out of range."""

    def __init__(self, field: str, value, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field}={value!r}: {reason}")


__all__ = ["PCGError", "ConfigError"]
