"""Input validation and the error taxonomy."""
