"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "basic_math",
    "bits",
    "recursion",
    "hashing",
    "sorting",
    "trees",
    "containers",
    "notation",
    "singly_linked",
    "doubly_linked",
]