"""Top-level package for the Camel Cards ranking engine."""

from . import batch, encoding, hands, parsing, ranking, rules

__all__ = [
    "batch",
    "encoding",
    "hands",
    "parsing",
    "ranking",
    "rules",
]
