"""HTTP API for the generation engine."""
