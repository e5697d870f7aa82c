"""Signing and header helpers."""
