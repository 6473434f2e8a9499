"""Behavioral patterns."""
