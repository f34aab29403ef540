#!/usr/bin/env python3
"""
Convenience entry point for running delaystart directly.

Usage: python run_delaystart.py [command] [options]
"""

from delaystart.cli.app import app

if __name__ == "__main__":
    app()
