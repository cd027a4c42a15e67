"""
Executable interface for use as a script.

See the main function for usage.
"""

import sys
import csv
import argparse
import logging
from .illumina import identifier
from .logging import IdentifierLoggerAdapter
from .util import yaml_dump
from . import config
from . import __version__ as VERSION

DOCS = {}
DOCS["description"] = "Parse Illumina FASTQ sequence identifiers."
DOCS["epilog"] = """
The actions are:

parse:  Write the fields of each identifier given, one row per identifier, as
        CSV (the default) or YAML.  The read, filter, control, and sample
        columns are left empty for identifiers without a second segment.
format: Write each identifier given back out in canonical form.

Identifiers that can't be parsed are logged and skipped, and the exit status
is then 1.  For example:
    seqid "@M03745:11:000000000-B54L5:1:2108:4127:8949 1:N:0:0"
"""

PARSER = argparse.ArgumentParser(
    description=DOCS["description"],
    epilog=DOCS["epilog"],
    formatter_class=argparse.RawDescriptionHelpFormatter)
PARSER.add_argument("identifiers", nargs="*", metavar="IDENTIFIER",
                    help="sequence identifier text (quote it if it has a space)")
PARSER.add_argument("-c", "--config", help="path to configuration file")
PARSER.add_argument("-a", "--action", default="parse",
                    help="program action (default: %(default)s)",
                    choices=["parse", "format"])
PARSER.add_argument("-V", "--version", action="store_true",
                    help="Print installed version of seqid package")
PARSER.add_argument("-v", "--verbose", action="count", default=0,
                    help="Increment log verbosity")
PARSER.add_argument("-q", "--quiet", action="count", default=0,
                    help="Decrement log verbosity")

LOGGER = logging.getLogger()

PARSE_VARIANTS = {
    "auto": identifier.parse,
    "minimal": identifier.parse_minimal,
    "extended": identifier.parse_extended}

def _setup_log(verbose, quiet):
    # Handle warnings via logging
    logging.captureWarnings(True)
    # Configure the root logger
    # each -v or -q decreases or increases the log level by 10, starting from
    # WARNING by default.
    lvl_current = LOGGER.getEffectiveLevel()
    lvl_subtract = (verbose - quiet) * 10
    verbosity = max(0, lvl_current - lvl_subtract)
    logging.basicConfig(stream=sys.stderr)
    LOGGER.setLevel(verbosity)

def _parse_all(texts, parser):
    """Parse each text, logging and skipping failures.

    Returns the list of parsed identifiers and the number skipped."""
    seqids = []
    failures = 0
    for text in texts:
        try:
            seqid = parser(text)
        except identifier.IdentifierError as err:
            failures += 1
            IdentifierLoggerAdapter(LOGGER, {"error": err}).error(
                "Skipping sequence identifier %r: %s", text, err)
            continue
        IdentifierLoggerAdapter(LOGGER, {"record": seqid}).debug(
            "Parsed sequence identifier %r", text)
        seqids.append(seqid)
    return seqids, failures

def _as_row(seqid):
    row = seqid._asdict()
    if seqid.sample is not None:
        row["sample"] = seqid.sample.number
    return row

def write_fields(texts, output="csv", variant="auto", stream=None):
    """Write the fields of each parsed identifier to a stream.

    Returns the number of identifiers that could not be parsed."""
    stream = stream or sys.stdout
    try:
        parser = PARSE_VARIANTS[variant]
    except KeyError as err:
        raise ValueError("unknown parse variant: %r" % variant) from err
    seqids, failures = _parse_all(texts, parser)
    rows = [_as_row(seqid) for seqid in seqids]
    if output == "csv":
        writer = csv.DictWriter(
            stream, fieldnames=list(identifier.SequenceIdentifier._fields),
            lineterminator="\n")
        writer.writeheader()
        writer.writerows(rows)
    elif output == "yaml":
        if rows:
            yaml_dump(rows, stream)
    else:
        raise ValueError("unknown output format: %r" % output)
    return failures

def write_canonical(texts, marker="@", stream=None):
    """Write each parsed identifier back out in canonical form.

    Returns the number of identifiers that could not be parsed."""
    stream = stream or sys.stdout
    seqids, failures = _parse_all(texts, identifier.parse)
    for seqid in seqids:
        stream.write(identifier.format_identifier(seqid, marker) + "\n")
    return failures

ACTIONS = {"parse": write_fields, "format": write_canonical}

def main(args_raw=None):
    """Executable interface for use as a script.

    Command-line arguments are defined by PARSER.  Run with --help to see from
    the command-line.  Returns the exit status."""
    try:
        args = PARSER.parse_args(args_raw)
        _setup_log(args.verbose, args.quiet)
        conf = config.layer_configs(
            config.paths_for_action(args.action, args.config))
        # If specific in the config, modify the log level.  Call _setup_log
        # again so that the command-line flags are applied after the new level
        # is set.
        newlevel = conf.get("loglevel")
        if not newlevel is None: # (since 0 is distinct from not set)
            LOGGER.setLevel(newlevel)
            _setup_log(args.verbose, args.quiet)
        if args.version:
            print(VERSION or "Not installed")
            return 0
        action_args = conf.get(args.action, {})
        failures = ACTIONS[args.action](args.identifiers, **action_args)
    except BrokenPipeError:
        return 0
    return 1 if failures else 0

if __name__ == '__main__':
    sys.exit(main())
