"""Helpers for container-backed integration tests: archives, image names, hooks and logs."""

__version__ = "0.20.0"