"""Fixed-width integer types, ranges, byte and string buffers, string helpers and vectors."""

__version__ = "1.0.0"
__all__ = ["chars", "growth", "inttypes", "ranges", "string_compat", "ubytes", "ustring", "vector"]