"""HTTP API for the resume optimizer."""
