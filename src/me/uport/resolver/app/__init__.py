"""
Application Layer

Process-level plumbing shared by the command line entry points.

Key Components:
- config.py: Configuration management using pydantic-settings
- cli.py: Logging and Sentry bootstrap
"""
