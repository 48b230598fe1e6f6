"""Bible text and cross-reference API."""
