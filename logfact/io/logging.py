import logging
import logging.handlers as handlers
import sys
from contextlib import contextmanager
from pathlib import Path

from colorama import Fore, Style

from logfact.config.config import logfact_config

# set up the console logging


class ColoredFormatter(logging.Formatter):
    """
    Colors the level name of console records
    """

    _colors = {
        "DEBUG": Fore.CYAN,
        "INFO": Fore.GREEN,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
        "CRITICAL": Fore.MAGENTA + Style.BRIGHT,
    }

    def format(self, record):

        message = super().format(record)

        color = self._colors.get(record.levelname)

        if color is None:

            return message

        return message.replace(
            record.levelname, f"{color}{record.levelname}{Style.RESET_ALL}", 1
        )


class LogFilter(object):
    """
    Drops all records of one level
    """

    def __init__(self, level):

        self._level = level

    def filter(self, log_record):

        return log_record.levelno != self._level


_dev_formatter = logging.Formatter(
    "%(asctime)s | %(name)s | %(levelname)s| %(funcName)s | %(lineno)d | %(message)s",
    datefmt="%m/%d/%Y %I:%M:%S %p",
)

_usr_formatter = logging.Formatter(
    "%(asctime)s | %(levelname)s | %(message)s", datefmt="%m/%d/%Y %I:%M:%S %p"
)

_console_formatter = ColoredFormatter(
    "%(asctime)s | %(levelname)s | %(message)s", datefmt="%H:%M:%S"
)


def get_path_of_log_file(log_file: str) -> Path:
    """
    returns the path of one of the log files, creating the
    log directory on first use
    """

    if log_file not in ("usr.log", "dev.log"):

        raise ValueError(f"{log_file} is not a logfact log file")

    log_dir: Path = Path(logfact_config.logging.path).expanduser()

    log_dir.mkdir(parents=True, exist_ok=True)

    return log_dir / log_file


def _rotating_file_handler(
    log_file: str, formatter: logging.Formatter, level: int
) -> handlers.TimedRotatingFileHandler:

    # a new file every day, 10 days kept
    handler = handlers.TimedRotatingFileHandler(
        get_path_of_log_file(log_file), when="D", interval=1, backupCount=10
    )

    handler.setFormatter(formatter)
    handler.setLevel(level)

    return handler


# everything, for whoever debugs the package
logfact_dev_log_handler = _rotating_file_handler("dev.log", _dev_formatter, logging.DEBUG)

# what the user should be able to read back
logfact_usr_log_handler = _rotating_file_handler("usr.log", _usr_formatter, logging.INFO)

logfact_console_log_handler = logging.StreamHandler(sys.stdout)
logfact_console_log_handler.setFormatter(_console_formatter)
logfact_console_log_handler.setLevel(logfact_config.logging.level)

warning_filter = LogFilter(logging.WARNING)

# the handlers the verbosity modes act on, the dev log is handled apart
_user_facing_handlers = (logfact_usr_log_handler, logfact_console_log_handler)

# levels to go back to with activate_logs
_saved_levels = {h: h.level for h in _user_facing_handlers}


def _current_levels() -> dict:

    return {h: h.level for h in _user_facing_handlers}


def _restore_levels(levels: dict) -> None:

    for handler, level in levels.items():

        handler.setLevel(level)


def _switch_levels(level: int, *targets) -> None:
    """
    remember the current levels, then move the targets
    (all user facing handlers by default) to level
    """

    _saved_levels.update(_current_levels())

    for handler in targets or _user_facing_handlers:

        handler.setLevel(level)


def silence_warnings():
    """
    supress warning messages in console and file usr logs
    """

    for handler in _user_facing_handlers:

        handler.addFilter(warning_filter)


def activate_warnings():
    """
    re-activate warning messages in console and file usr logs
    """

    for handler in _user_facing_handlers:

        handler.removeFilter(warning_filter)


def update_logging_level(level):
    """
    update the logging level to the console
    """
    logfact_console_log_handler.setLevel(level)


def silence_logs():
    """
    Turn off all logging, the dev log included
    """

    logfact_dev_log_handler.setLevel(logging.CRITICAL)

    _switch_levels(logging.CRITICAL)


quiet_mode = silence_logs


def loud_mode():
    """
    turn on all logging
    """

    _switch_levels(logging.INFO)


def activate_logs():
    """
    re-activate silenced logs, going back to the levels
    in use before the last change of mode
    """

    logfact_dev_log_handler.setLevel(logging.DEBUG)

    _restore_levels(_saved_levels)


def debug_mode():
    """
    activate debug in the console, the usr file keeps its level
    """

    _switch_levels(logging.DEBUG, logfact_console_log_handler)


@contextmanager
def silence_console_log():
    """
    temporarily silence the console and usr logs
    """

    previous = _current_levels()

    _restore_levels({h: logging.ERROR for h in _user_facing_handlers})

    try:
        yield

    finally:

        _restore_levels(previous)


def setup_logger(name):

    log = logging.getLogger(name)

    # the handlers do the filtering
    log.setLevel(logging.DEBUG)

    for enabled, handler in (
        (logfact_config.logging.developer, logfact_dev_log_handler),
        (logfact_config.logging.console, logfact_console_log_handler),
        (logfact_config.logging.usr, logfact_usr_log_handler),
    ):

        if enabled:

            log.addHandler(handler)

    # no duplicates through the parents
    log.propagate = False

    return log
