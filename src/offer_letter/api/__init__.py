"""HTTP API for the offer letter service."""
