"""Core utilities: configuration, logging and error handling."""
