"""Expose API endpoint routers."""

from tastelog.api.endpoints import places, stats, visits

__all__ = ["places", "stats", "visits"]
