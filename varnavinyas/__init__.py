"""Nepali orthography toolkit: punctuation checks, transliteration, legacy font decoding and tokenization."""

__version__ = "0.1.0"

__all__ = [
    "categories",
    "config",
    "legacy",
    "linemap",
    "punctuation",
    "scheme",
    "tokenizer",
    "transliteration",
]