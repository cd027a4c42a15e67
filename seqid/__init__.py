"""
Package to parse the sequence identifiers written by Illumina sequencers.

Brief package structure overview:

illumina.identifier.parse turns a single FASTQ header line such as
"@M03745:11:000000000-B54L5:1:2108:4127:8949 1:N:0:0" into an immutable
SequenceIdentifier, or raises an IdentifierError subclass naming what was
wrong with it.  format_identifier goes the other way.  Reading FASTQ files is
left to the caller.  The config and logging modules support the command-line
interface in __main__.
"""

from . import config
from .illumina.identifier import (
    parse, parse_minimal, parse_extended, parse_tile_descriptor,
    format_identifier, SequenceIdentifier, Sample, NoSample, SampleNumber,
    NO_SAMPLE, IdentifierError, MalformedHeader, MalformedTrailer, EmptyField,
    InvalidNumber, InvalidTileDescriptor, InvalidFilterFlag)
CONFIG = config.layer_configs([config.path_for_config()])

def __deduce_version():
    """Return version string for this package, if installed.

    This infers the version originally defined in setup.py, but only if it can
    find an installed package and the filesystem path for the loaded package
    agrees with it.
    """
    from importlib.metadata import version, files, PackageNotFoundError
    from pathlib import Path
    try:
        # Is there an installed package matching this package name, *and* does
        # that package refer to this very file we're currently in?  If so,
        # return that version string, but in any other case, return an empty
        # string.
        ver = version(__package__)
        this = [p for p in files(__package__) if Path(__file__).samefile(p.locate())]
        if this:
            return ver
    except PackageNotFoundError:
        pass
    return ""

__version__ = __deduce_version()
