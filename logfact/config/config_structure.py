import logging
from dataclasses import dataclass, field
from enum import IntEnum


# logging
class LoggingLevel(IntEnum):
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


@dataclass
class Logging:
    path: str = "~/.logfact/log"
    developer: bool = "off"
    usr: bool = "on"
    console: bool = "on"
    level: LoggingLevel = LoggingLevel.INFO


# the layout of the hard-coded table is fixed at build time
@dataclass(frozen=True)
class TableSettings:
    size: int = 126
    max_ulp: float = 2.0


@dataclass
class ReferenceSettings:
    # decimal digits used by mpmath for the reference values
    precision: int = 50


@dataclass
class Config:
    logging: Logging = field(default_factory=lambda: Logging())
    table: TableSettings = field(default_factory=lambda: TableSettings())
    reference: ReferenceSettings = field(default_factory=lambda: ReferenceSettings())
