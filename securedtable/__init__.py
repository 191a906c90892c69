"""Chained hash table keyed by a SHA-256 based hash, with list and printf helpers."""

__version__ = "0.1.0"
__all__ = ["hashtable", "linked_list", "printf", "sha256"]