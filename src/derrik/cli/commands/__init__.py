"""Derrik subcommands."""
