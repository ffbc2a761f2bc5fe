"""HTTP API for the calculators."""
