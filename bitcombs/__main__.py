"""Allow ``python -m bitcombs``."""

from bitcombs.cli import main

if __name__ == "__main__":
    main()
