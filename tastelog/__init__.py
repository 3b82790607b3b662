"""Taste Log: a personal food-visit log."""
