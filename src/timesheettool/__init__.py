# SPDX-License-Identifier: MIT

from timesheettool.cleanup import register_cleanup
from timesheettool.initialize import initialize
from timesheettool.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
