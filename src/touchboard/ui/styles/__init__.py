"""Colour themes and stylesheets."""
