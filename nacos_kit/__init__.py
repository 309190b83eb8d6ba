"""Data models, request parameters, UUID generation and parsing, and small utilities for service discovery and configuration clients."""

__version__ = "0.1.0"