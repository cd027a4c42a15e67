"""
Utility functions used throughout the package.

These are just wrappers for YAML reading and writing.
"""

import warnings
import yaml

def yaml_load(path):
    """Load YAML from a file, assuming a dictionary if empty."""
    with open(path) as fin:
        with warnings.catch_warnings():
            warnings.filterwarnings("ignore", category=DeprecationWarning)
            data = yaml.safe_load(fin)
    # If there's no actual yaml data in the file (like, say, just a bunch of
    # comments) we get None!  That makes it tricky later on so for our purposes
    # we'll catch that and default to a dict.
    data = data or {}
    return data

def yaml_dump(data, stream=None):
    """Write plain data as block-style YAML, keeping key order."""
    return yaml.safe_dump(
        data, stream, default_flow_style=False, sort_keys=False)
