"""Embedded POH tables for each supported aircraft."""

from . import arrow3, warrior3

__all__ = ["arrow3", "warrior3"]
