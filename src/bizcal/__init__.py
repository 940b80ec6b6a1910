# SPDX-License-Identifier: MIT

from bizcal.cleanup import register_cleanup
from bizcal.initialize import initialize
from bizcal.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
