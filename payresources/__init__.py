"""Typed enums, union values and request parameter objects for a payments API."""

__version__ = "0.1.0"