"""Staybook domain layer."""
