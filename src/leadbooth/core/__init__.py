"""Core infrastructure: configuration-backed services shared by all modules."""
