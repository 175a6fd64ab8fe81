"""Coordinate based weather lookup front end."""
