"""CLI Module - Command-line interface for SkillPath.

This module provides a rich interactive CLI built with Typer and Rich.

Usage:
    skillpath --help        Show all commands
    skillpath assess        Take the skill assessment
    skillpath dashboard     View learning statistics
    skillpath courses       Browse the course catalog
    skillpath serve         Run the API server
"""

from skillpath.cli.main import app, main

__all__ = ["app", "main"]
