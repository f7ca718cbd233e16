"""Configuration loading for svcinit."""
