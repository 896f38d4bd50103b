"""Core configuration, persistence, and error handling."""
