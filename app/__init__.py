"""Wishwell application package."""
