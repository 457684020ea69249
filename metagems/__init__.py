"""Reflection and formatting helpers: enums, rendering, RPN, variants, type erasure."""

__version__ = "0.1.0"

__all__ = [
    "cirformat",
    "dispatch",
    "duff",
    "enums",
    "erasure",
    "fibonacci",
    "jsonparams",
    "reflect",
    "rpn",
    "serialize",
    "series",
    "shell",
    "tuples",
    "variant",
]