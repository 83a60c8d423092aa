"""Settings that steer how Rust types map onto TypeScript types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TypeGenerationConfig:
    """Options for type generation.

    ``js`` selects the JavaScript-value serialization model, in which missing
    values are ``undefined``, maps are ``Map`` and 128-bit integers are
    ``bigint``. When it is off the JSON model is used.
    """

    js: bool = False
    missing_as_null: bool = False
    hashmap_as_object: bool = False
    large_number_types_as_bigints: bool = False
    type_prefix: str = ""
    type_suffix: str = ""

    def format_name(self, name: str) -> str:
        """Return ``name`` with the configured prefix and suffix applied."""
        return f"{self.type_prefix}{name}{self.type_suffix}"