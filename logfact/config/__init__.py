from .config import logfact_config
