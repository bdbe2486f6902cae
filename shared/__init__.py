"""Shared foundation for the geographic converter tools."""
