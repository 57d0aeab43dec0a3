"""Caller-side application state."""
