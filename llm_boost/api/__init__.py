"""API Layer — FastAPI error handlers and probes around the core."""
