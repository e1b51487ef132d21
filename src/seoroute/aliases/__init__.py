"""Aliases — case-insensitive alias index and its swappable snapshot.

The index is built wholesale from every document's aliases and replaced
atomically on refresh; lookups never see a half-built index.
"""
