# SPDX-License-Identifier: MIT

from taskgantt.cleanup import register_cleanup
from taskgantt.initialize import initialize
from taskgantt.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
