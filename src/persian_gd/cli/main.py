"""Main CLI entry point."""

from persian_gd.cli.app import create_app


def main() -> None:
    """Main CLI entry point."""
    app = create_app()
    app()


if __name__ == "__main__":
    main()
