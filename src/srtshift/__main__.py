"""Allow running srtshift with ``python -m srtshift``."""
from .cli import main


if __name__ == "__main__":
    main();
