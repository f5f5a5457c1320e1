"""Output generators for calculation results."""
