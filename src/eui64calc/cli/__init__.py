"""Consumers of the core: the command-line interface."""
