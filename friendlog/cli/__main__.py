"""Allow ``python -m friendlog.cli``."""
from friendlog.cli import cli

if __name__ == "__main__":
    cli(obj={})
