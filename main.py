import logging

from seashell.config import LOG_LEVEL
from seashell.job_control import init_signal_handlers
from seashell.shell import Shell, init_readline


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    init_signal_handlers()
    init_readline()

    Shell().run()


if __name__ == "__main__":
    main()
