"""Core interfaces/abstractions.

Why:
- Defines the contracts (Protocol) that concrete adapters and views implement.
- Inverts dependencies: the core depends on abstractions.
"""
