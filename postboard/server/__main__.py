"""Allow ``python -m postboard.server``."""

from postboard.server.main import run

if __name__ == "__main__":
    run()
