"""Pydantic request/response models (the HTTP wire contract)."""
