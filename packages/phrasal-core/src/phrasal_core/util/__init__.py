"""Utility helpers for phrasal-core."""
