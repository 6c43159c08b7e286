"""HTTP API: health checks, dashboard redirect and the JSON routes."""
