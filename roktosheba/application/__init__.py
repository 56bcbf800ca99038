"""Application layer: DTOs, ports and services for each component."""
