"""Core wiring: configuration, lifespan, exception handlers, shared constants."""
