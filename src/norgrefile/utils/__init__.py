"""Utility helpers for norgrefile."""
