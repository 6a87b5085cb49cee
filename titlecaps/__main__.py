"""Package entry point for ``python -m titlecaps``."""

from titlecaps.cli import main

if __name__ == "__main__":
    main()
