"""Interfaces for Rolodex."""
