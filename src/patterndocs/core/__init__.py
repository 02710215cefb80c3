"""Core navigation, catalog and rendering logic."""
