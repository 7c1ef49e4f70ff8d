# SPDX-License-Identifier: MIT

from projectline.cleanup import register_cleanup
from projectline.initialize import initialize
from projectline.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
