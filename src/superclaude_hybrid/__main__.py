"""Allow ``python -m superclaude_hybrid <command>``."""

from superclaude_hybrid.cli.main import cli

if __name__ == "__main__":
    cli(prog_name="superclaude-hybrid")
