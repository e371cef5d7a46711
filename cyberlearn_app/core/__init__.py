"""Core infrastructure: configuration, extensions, bootstrap and error handling."""
