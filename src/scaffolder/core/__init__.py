"""Core bootstrap and plugin-resolution layer."""
