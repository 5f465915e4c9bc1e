"""Entry point for the ratio split daemon when run as a module."""

from .daemon import main

if __name__ == "__main__":
    main()
