"""Projectile motion simulator with air resistance, bouncing and selectable gravity."""

__version__ = "0.1.0"

__all__ = ["vector", "projectile", "settings", "simulation", "app"]