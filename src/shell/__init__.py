"""Interactive command layer.

This package interprets line-oriented filesystem commands against one
session-scoped filesystem and renders their console output.
"""
