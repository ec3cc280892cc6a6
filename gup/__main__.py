"""Allow ``python -m gup``."""

from gup.cli import app

if __name__ == "__main__":
    app()
