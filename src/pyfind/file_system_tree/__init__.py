"""Streaming directory traversal producing the entries that expressions are evaluated against.

This package walks directory trees in pre-order or depth-first order, building
anytree nodes as it goes so that every entry knows its parent chain and depth.
"""
