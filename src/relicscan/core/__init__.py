"""Core services: configuration, option grammar, logging and errors."""
