import os
from pathlib import Path


def get_path_of_user_config() -> Path:

    if os.environ.get("LOGFACT_CONFIG") is not None:

        config_path: Path = Path(os.environ.get("LOGFACT_CONFIG"))

    else:

        config_path: Path = Path().home() / ".config" / "logfact"

    if not config_path.exists():

        config_path.mkdir(parents=True)

    return config_path


__all__ = [
    "get_path_of_user_config",
]
