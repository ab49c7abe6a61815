"""Runnable example scenes built on the public API."""
