"""
Configuration file handling.

Settings are plain YAML dictionaries layered on top of each other: the package
default, then the system-wide file, then the defaults for the chosen
command-line action, then any file given explicitly.
"""
import logging
import collections.abc
from pathlib import Path
import yaml
from .util import yaml_load

SYSTEM_CONFIG = "/etc/seqid.yml"

LOGGER = logging.getLogger(__name__)

# Adapted from
# https://stackoverflow.com/a/3233356
def update_tree(tree_orig, tree_new):
    """Recursively update one dict with another.

    Note that the original is modified in place."""
    for key, val in tree_new.items():
        if isinstance(val, collections.abc.Mapping):
            tree_orig[key] = update_tree(tree_orig.get(key, {}), val)
        else:
            tree_orig[key] = val
    return tree_orig

def layer_configs(paths):
    """Load configuration for each path given, merging all options.

    The later paths take priority.  Empty/None entries are ignored, and paths
    that don't exist are treated as empty."""
    config = {}
    for path in paths:
        if not path:
            continue
        if not Path(path).exists():
            LOGGER.info("Configuration file not found at %s", path)
            continue
        try:
            cfg = yaml_load(path)
        except yaml.YAMLError:
            LOGGER.critical("Configuration parse error while loading %s", path)
            raise
        LOGGER.info("Configuration loaded from %s", path)
        update_tree(config, cfg)
    return config

def path_for_config(suffix=None):
    """Return config file path relative to package data directory."""
    name = "config_%s.yml" % suffix if suffix else "config.yml"
    return Path(__file__).parent / "data" / name

def paths_for_action(action=None, path=None):
    """List the configuration paths to layer for a command-line action.

    In order: package default, system default, action default, and the
    explicitly-given path (if any)."""
    return [
        path_for_config(),
        SYSTEM_CONFIG,
        path_for_config(action) if action else None,
        path]
