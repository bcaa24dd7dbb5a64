"""Allows `python -m plaid_client ...`."""

from __future__ import annotations

from plaid_client.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
