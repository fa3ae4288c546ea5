from scriptorium.cli.app import app

__all__ = ["app"]
