"""Staybook application layer."""
