"""Command line interface for keyecho."""
