"""Dimension parsing, shape classification and stock lookup tables."""
