"""RoktoSheba: blood-donation coordination API."""
