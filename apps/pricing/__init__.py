"""Pricing app package."""
