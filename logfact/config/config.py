from pathlib import Path

from omegaconf import OmegaConf

from logfact.exceptions.custom_exceptions import (ReadOnlyConfigurationOverride,
                                                  custom_warnings)
from logfact.io.package_data import get_path_of_user_config

from .config_structure import Config

# sections fixed at build time, never taken from or written to user files
_read_only_keys = ["table"]


def load_user_configuration(config: Config, config_dir: Path) -> Config:
    """
    merge every *.yml file found in config_dir on top of config,
    skipping the read only sections

    :param config: the configuration to start from
    :param config_dir: the directory to glob
    :returns: the merged configuration
    """

    for user_config_file in sorted(config_dir.glob("*.yml")):

        _partial_conf = OmegaConf.load(user_config_file)

        for key in _read_only_keys:

            if key in _partial_conf:

                # the logger reads this configuration, so it cannot be used yet
                custom_warnings.warn(
                    f"{user_config_file} sets the read only section '{key}', "
                    "it is ignored",
                    ReadOnlyConfigurationOverride,
                )

                del _partial_conf[key]

        config = OmegaConf.merge(config, _partial_conf)

    return config


# Read the default Config, then glob the config directory
logfact_config: Config = load_user_configuration(
    OmegaConf.structured(Config), get_path_of_user_config()
)
