"""Screens of the gitlanes TUI client."""
