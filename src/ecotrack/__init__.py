"""Eco Track Bangladesh API."""
