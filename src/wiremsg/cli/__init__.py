"""Command-line interface for wiremsg."""
