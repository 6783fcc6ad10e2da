"""Adapters for loading and rendering feeds."""
