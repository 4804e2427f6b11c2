"""In-memory versioned filesystem graph.

This package models entities, the links naming them, directory tables,
and the graph operations that keep hard links and reference sets consistent.
"""
