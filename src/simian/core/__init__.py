"""Simian core: configuration, constants, errors and shared models."""
