"""Data parsers for EVE Online SDE."""

from .sde_jsonl import SDEJsonlParser

__all__ = ["SDEJsonlParser"]
