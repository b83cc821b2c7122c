"""Grid canvas layout helpers."""
