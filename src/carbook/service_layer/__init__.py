"""Service layer: commands, handlers, the message bus and the car service facade."""
