from .logging import (activate_logs, activate_warnings, debug_mode, loud_mode,
                      quiet_mode, setup_logger, silence_console_log,
                      silence_logs, silence_warnings, update_logging_level)
