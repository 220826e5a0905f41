"""
Package entry point.

Allows running the application via:

    python -m smartschedule

This simply forwards execution to smartschedule.cli.main().
"""

from smartschedule.cli import main

if __name__ == "__main__":
    main()
