"""Upstart backend."""
