from docstore.cli.cli import app

__all__ = ["app"]
