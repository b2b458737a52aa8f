"""Nationforge backend package wiring and entrypoints."""

from nationforge_backend.settings import BackendSettings, get_settings


def main() -> None:
    """Run the development server."""
    from nationforge_backend.main import run_dev

    run_dev()


__all__ = ["BackendSettings", "get_settings", "main"]
