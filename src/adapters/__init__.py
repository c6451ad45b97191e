"""Concrete adapters: HTTP client, JSON codec, data sources and gateways."""
