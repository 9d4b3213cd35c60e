# SPDX-License-Identifier: MIT

__version__ = "0.1.0"

from bujo.terminal.app import run  # noqa: E402


def main() -> None:
    run()


if __name__ == "__main__":
    main()
