"""Attribute-based authorization gate for the Quran content API."""

__version__ = "0.1.0"
