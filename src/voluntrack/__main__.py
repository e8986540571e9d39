# src/voluntrack/__main__.py
"""Module entry point: ``python -m voluntrack``."""

from voluntrack.app import main

if __name__ == "__main__":
    main()
