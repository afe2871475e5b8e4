"""Presentation layer - command line."""
