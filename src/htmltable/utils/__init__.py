"""Utility helpers shared across htmltable modules."""
