from logfact.io.logging import setup_logger

from .config.config import logfact_config

log = setup_logger(__name__)
log.propagate = False

from ._version import __version__
from .config.config_utils import (get_current_configuration_copy,
                                  show_configuration)
from .io import (activate_logs, activate_warnings, debug_mode, loud_mode,
                 quiet_mode, silence_console_log, silence_logs,
                 silence_warnings, update_logging_level)
from .utils.statistics.gammaln import (LOG_FACTORIAL_TABLE_SIZE,
                                       checked_logfactorial, logfactorial)

log.debug(f"logfact {__version__} loaded, table of {LOG_FACTORIAL_TABLE_SIZE} entries")
