"""Bounded scanning and rendering of remote object hierarchies."""
