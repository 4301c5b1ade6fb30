"""Request/response contracts."""
