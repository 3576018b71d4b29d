"""Command line examples for the minidrone package."""
