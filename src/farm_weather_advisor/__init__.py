"""Weather-driven agronomic risk analysis for farm management."""

__version__ = "0.1.0"
