"""Knock Out! dice game: engine, observers and persistence helpers."""
