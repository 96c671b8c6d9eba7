"""Core: domain, configuration and the declaration-to-documentation services."""
