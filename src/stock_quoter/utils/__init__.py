"""Utility helpers for the stock_quoter package."""
