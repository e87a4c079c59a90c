"""CARBOOK

A small record service for rentable cars. Cars are created, read,
updated and deleted through a validating service facade that returns
typed results instead of raising for expected outcomes.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
