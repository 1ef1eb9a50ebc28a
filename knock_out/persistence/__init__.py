"""Event recording, JSON and CSV helpers."""
