"""Semantic-release CI/CD scaffolding for npm projects."""

__version__ = "1.0.0"
