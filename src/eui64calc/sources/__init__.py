"""Input sources for batch calculation."""
