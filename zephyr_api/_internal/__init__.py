"""Internal modules for the Zephyr API backend.

WARNING: This package contains the machinery behind the public commands.
These are not intended for direct use in application code.

Modules:
    request - Request dispatcher, models and URL helpers
    http - Shared HTTP client configuration
"""
