"""Pokébattle: team management and battle simulation over a relational store."""

__version__ = "0.1.0"
