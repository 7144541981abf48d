"""HTTP routes for the lookup service."""
