"""Entrypoints (inbound adapters) for CARBOOK.

Expose the car service to the outside world. Parse and validate inputs,
call the service facade, and present results.

Dependency rule: may import `carbook.service_layer` and `carbook.bootstrap`;
avoid importing `carbook.adapters` directly (database management commands
excepted).
"""
