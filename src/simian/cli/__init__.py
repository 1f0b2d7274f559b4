"""Simian command-line interface."""
