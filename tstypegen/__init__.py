"""Convert Rust type expressions into TypeScript type annotations."""

__version__ = "0.1.0"

__all__ = ["config", "conversion", "syntax", "types"]