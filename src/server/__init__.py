"""HTTP API for norgrefile."""
