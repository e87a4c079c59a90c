"""Concrete implementations of the CARBOOK ports."""
