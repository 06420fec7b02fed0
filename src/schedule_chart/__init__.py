# SPDX-License-Identifier: MIT

from loguru import logger as _logger

from schedule_chart.terminal.app import run

_logger.disable("schedule_chart")


def main() -> None:
    run()


if __name__ == "__main__":
    main()
