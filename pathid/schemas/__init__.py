"""Packaged JSON schemas for pathid input files."""
