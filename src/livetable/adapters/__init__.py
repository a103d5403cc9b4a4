"""Adapters – framework and ORM bindings (install the matching extra)."""
