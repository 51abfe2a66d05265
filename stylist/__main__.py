"""Allow ``python -m stylist``."""

from stylist.cli import run

if __name__ == "__main__":
    run()
