"""Command-line utilities for the Staybook backend."""
