"""Checksummed text encodings."""
