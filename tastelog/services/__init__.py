"""Query building, caching and data access."""
