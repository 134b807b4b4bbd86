#!/usr/bin/env python3
"""hostcolors - query the colors of the terminal hosting this process."""

from hostcolors.cli.main import main

if __name__ == "__main__":
    main()
