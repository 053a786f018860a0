import logging
import sys
from collections import UserDict
from pathlib import Path
from typing import Any, Optional

import hiyapyco

logger = logging.getLogger(__name__)


class VisionConfigException(Exception):
    def __init__(self, key):
        super().__init__(f"Missing required configuration variable '{key}'")


class HierarchicalConfig(UserDict):
    """
    HierarchicalConfig is a UserDict that loads configuration from a tiered set of config files.

    This class will load `Vision.common.yaml` from the directory of the entrypoint that imports it, and will
    walk the filesystem upwards a configurable number of times to find other `Vision.common.yaml` files.

    The discovered files are merged using a YAML object merger (HiYaPyCo) that supports Jinja2 syntax. Files closer
    to the entrypoint win.

    Example usage:
        from infra_vision.lib.config import vision_env

        vision_env.get("team", "platform")
        vision_env.require("tag_namespace")

    """

    def __init__(self, limit=5, filename="Vision.common.yaml", entrypoint: Optional[Path] = None):
        """
        Create a HierarchicalConfig UserDict

        :param limit: Max parent directories to walk
        :param filename: Filename to find and merge
        :param entrypoint: File to start walking from. Defaults to the ``__main__`` module's file.
        """
        super().__init__()
        self.filename = filename
        configs = list(reversed(self._discover_configs(limit, entrypoint)))
        logger.debug("Found configs in %s", configs)

        if configs:
            # expose the data from the loader as our UserDict backing store
            self.data = dict(hiyapyco.load([str(path) for path in configs]) or {})

    def require(self, key: str) -> Any:
        """
        Require a key from the configuration and return it. If not found, throw a `VisionConfigException`

        :param key: Key string to require from the configuration
        :return: Object
        """
        if v := self.get(key):
            return v
        else:
            raise VisionConfigException(key)

    def _discover_configs(self, limit: int, entrypoint: Optional[Path]) -> list[Path]:
        """
        Find the entrypoint and walk upwards to find other files

        :param limit: Max parent directories to walk
        :param entrypoint: File to start from, or None to use ``__main__``
        :return: Paths ordered from nearest to farthest
        """
        config_paths = []

        if entrypoint is None:
            main_file = getattr(sys.modules["__main__"], "__file__", None)
            if not main_file:
                # REPLs and `python -c` have no entrypoint to anchor on
                logger.debug("No __file__ for __main__, skipping config discovery")
                return config_paths

            entrypoint = Path(main_file)

        entrypoint = entrypoint.absolute()
        logger.debug("Entrypoint: %s", entrypoint)

        for path in list(entrypoint.parents)[:limit]:
            logger.debug("Looking in [%s] for [%s]", path, self.filename)
            maybe_config = path / self.filename
            if maybe_config.exists():
                logger.debug("Detected config [%s]", maybe_config)
                config_paths.append(maybe_config)

            # stop at the project root, but still allow a config file to live there
            if (path / ".git").is_dir():
                logger.debug("Found project root, breaking")
                break

        return config_paths


# Singleton to avoid loading and merging configuration multiple times on import
vision_env = HierarchicalConfig()
