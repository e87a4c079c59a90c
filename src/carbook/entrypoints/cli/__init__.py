"""The ``carbook`` command-line interface."""
