"""Rajshahi emergency hotline directory."""
