"""Utilities: configuration glue, DI, JWT and observability."""
