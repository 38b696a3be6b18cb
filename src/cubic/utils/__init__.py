"""Utility functions for the cubic package."""
