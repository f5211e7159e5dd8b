"""
Entry point for running run_reporter as a module.

Usage:
    python -m run_reporter [command] [options]
"""

from run_reporter.cli import main

if __name__ == "__main__":
    main()
