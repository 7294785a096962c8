"""HTTP API for the evaluation engine."""
