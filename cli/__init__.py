"""Command-line interface for blogscan."""
