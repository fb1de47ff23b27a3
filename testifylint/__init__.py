"""Checkers for misused testify assertions in Go test code, with their registry and configuration."""

__version__ = "0.1.0"