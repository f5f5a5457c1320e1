"""Derivations: MAC address to EUI-64 and IPv6 address."""
