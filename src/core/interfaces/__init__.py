"""Core contracts (Protocol) implemented by operations and adapters.

The executor depends on these abstractions only, so transports and header
enrichers can be swapped in tests.
"""
