"""Allow ``python -m src.counters``."""
from src.counters.infrastructure.cli.cli import run

if __name__ == "__main__":
    run()
