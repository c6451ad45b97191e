"""Domain models and errors.

The domain knows nothing about HTTP, the CLI or rich: only employees and
the outcome of loading them.
"""
