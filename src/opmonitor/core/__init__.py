"""Core domain: models, ports, errors and pure operations."""
