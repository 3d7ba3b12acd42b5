# SPDX-License-Identifier: MIT

from momentum.cleanup import register_cleanup
from momentum.initialize import initialize
from momentum.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
