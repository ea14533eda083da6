"""Recursive-descent syntax analyzer for SIGNAL."""
