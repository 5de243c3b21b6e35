"""Adapters – transports for the invocation boundary."""
