"""Staybook infrastructure layer."""
