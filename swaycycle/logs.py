import logging
import sys

NOTICE = 25
logging.addLevelName(NOTICE, "NOTICE")

default_format = "%(levelname)s %(message)s"
debug_format = (
    "%(asctime)s %(levelname)s [%(name)s %(filename)s:%(lineno)d] "
    "pid=%(process)d %(message)s"
)


class ColoredFormatter(logging.Formatter):
    """Colors the level name, for terminals only."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "NOTICE": "\033[34m",  # Blue
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        if record.levelname in self.COLORS:
            # other handlers see the same record
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = (
                f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"
            )
        return super().format(record)


def setup_logging(
    debug: bool = False, verbose: bool = False, logfile: str | None = None
) -> logging.Handler:
    """
    Sends swaycycle's log records to stdout or, if given, appends them to
    `logfile`. Shows NOTICE and up by default, INFO with `verbose` and
    everything including source locations with `debug`. Level names are
    colored when stdout is a terminal.
    """
    if logfile:
        handler: logging.Handler = logging.FileHandler(logfile, mode="a")
        colored = False
    else:
        handler = logging.StreamHandler(sys.stdout)
        colored = sys.stdout.isatty()

    if debug:
        level = logging.DEBUG
        log_format = debug_format
    else:
        level = logging.INFO if verbose else NOTICE
        log_format = default_format

    formatter = ColoredFormatter if colored else logging.Formatter
    handler.setFormatter(formatter(log_format))

    logger = logging.getLogger("swaycycle")
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return handler
