"""Standalone helpers for characters, numbers, strings, byte buffers, linked lists and output."""

__all__ = ["chars", "convert", "lists", "memory", "output", "text"]