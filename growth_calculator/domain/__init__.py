"""Static fund data."""
