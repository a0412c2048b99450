"""Dependency analysis and conversion planning for Aura and Visualforce to LWC migrations."""

__version__ = "0.1.0"
