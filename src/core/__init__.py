"""Core: domain, contracts, configuration and the presenter."""
