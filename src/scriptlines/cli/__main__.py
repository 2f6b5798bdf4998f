"""Main entry point for scriptlines CLI when run as a module."""

from scriptlines.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
