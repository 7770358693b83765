"""Adapters for Rolodex.

Provide concrete implementations of the repository interfaces.

Dependency rule: may import `rolodex.domain` and `rolodex.interfaces`; neither
of those may import this package.
"""
