"""Core constants shared across layers."""

# Status filter value that disables filtering on list endpoints.
STATUS_FILTER_ALL = "all"

# Message bodies kept stable for existing clients.
MESSAGE_DONOR_ASSIGNED = "Donor assigned successfully."
MESSAGE_ROOT = "RoktoSheba Server is Running"
