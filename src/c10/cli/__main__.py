#!/usr/bin/env python3
"""
CLI entry point for c10.cli module.

This allows running: python -m c10.cli
"""

from .main import cli

if __name__ == "__main__":
    cli()
