from pathlib import Path
from typing import Optional

from omegaconf import OmegaConf
from omegaconf.dictconfig import DictConfig
from rich.tree import Tree

from logfact.io.logging import setup_logger
from logfact.io.package_data import get_path_of_user_config

from .config import _read_only_keys, logfact_config

log = setup_logger(__name__)


def recurse_dict(d, tree):

    for k, v in d.items():

        if (type(v) == dict) or isinstance(v, DictConfig):

            branch = tree.add(
                k, guide_style="bold medium_orchid", style="bold medium_orchid"
            )

            recurse_dict(v, branch)

        else:

            tree.add(
                f"{k}: [blink cornflower_blue]{v}",
                guide_style="medium_spring_green",
                style="medium_spring_green",
            )

    return


def show_configuration(sub_menu: Optional[str] = None) -> Tree:
    """
    display the current configuration or a sub menu if
    provided
    """

    tree = Tree(
        "config", guide_style="bold medium_orchid", style="bold medium_orchid"
    )

    if sub_menu is None:

        recurse_dict(logfact_config, tree)

    elif sub_menu in logfact_config:

        recurse_dict(logfact_config[sub_menu], tree)

    else:

        msg = f"{sub_menu} is not in the logfact configuration"

        log.error(msg)

        raise AssertionError(msg)

    return tree


def get_current_configuration_copy(
    file_name: str = "logfact_config.yml", overwrite: bool = False
) -> Path:
    """
    write a copy of the CURRENT configuration to the config directory
    """

    outfile: Path = get_path_of_user_config() / file_name

    if outfile.exists() and (not overwrite):

        msg = f"{outfile} exists! Set overwrite to True"

        log.error(msg)

        raise RuntimeError(msg)

    _valid_keys = [k for k in logfact_config.keys() if k not in _read_only_keys]

    config_copy = OmegaConf.masked_copy(logfact_config, _valid_keys)

    with outfile.open("w") as f:

        f.write(OmegaConf.to_yaml(config_copy, sort_keys=True, resolve=True))

    log.debug(f"wrote the current configuration to {outfile}")

    return outfile
