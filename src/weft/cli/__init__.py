from weft.cli.main import cli

__all__ = ["cli"]
