"""
Parser for the sequence identifiers at the top of each FASTQ record.

An Illumina sequence identifier looks like this:

    @M03745:11:000000000-B54L5:1:2108:4127:8949 1:N:0:0

The first segment gives the instrument, its run counter, the flow cell ID, the
lane, a four-digit tile descriptor (side, swath, and two-digit tile number),
and the x/y position of the cluster within the tile.  The optional second
segment gives the read number, whether the read was filtered, the control
number, and the sample number from the sample sheet (0 meaning there was no
sample sheet entry for the read).

See the parse function for usage.  Everything here is pure and read-only.
"""

import re
from abc import ABC, abstractmethod
from collections import namedtuple

MARKER = "@"
DIGITS = re.compile(r"[0-9]+")

HEADER_FIELDS = [
    "sequencer_id", "run_count", "flow_cell_id", "lane",
    "side", "swath", "tile", "x", "y"]
TRAILER_FIELDS = ["read", "is_filtered", "control_number", "sample"]

FILTER_FLAGS = {"N": False, "Y": True}


class IdentifierError(ValueError):
    """Any sort of problem parsing a sequence identifier.

    The offending text is available as the line attribute, and for errors
    about a single field the field name is available as the field attribute.
    """

    def __init__(self, msg, line=None, field=None):
        super().__init__(msg)
        self.line = line
        self.field = field

class MalformedHeader(IdentifierError):
    """The first segment doesn't have exactly seven colon-separated tokens."""

class MalformedTrailer(IdentifierError):
    """The second segment doesn't have exactly four colon-separated tokens."""

class EmptyField(IdentifierError):
    """A required text field is empty."""

class InvalidNumber(IdentifierError):
    """A numeric field isn't a valid base-10 integer."""

class InvalidTileDescriptor(IdentifierError):
    """The tile descriptor isn't exactly four ASCII digits."""

class InvalidFilterFlag(IdentifierError):
    """The filter flag is something other than N or Y."""


class Sample(ABC):
    """The sample sheet entry a read was assigned to.

    This is either NoSample (no sample sheet or index, written as 0) or
    SampleNumber (the one-indexed position on the sample sheet).
    """

    __slots__ = ()

    @property
    @abstractmethod
    def number(self):
        """Integer written for this sample in an identifier."""

    @staticmethod
    def from_token(token, line=None):
        """Convert the last token of an identifier into a Sample."""
        number = _parse_number(token, "sample", line)
        if number == 0:
            return NO_SAMPLE
        return SampleNumber(number)

    def __str__(self):
        return str(self.number)


class NoSample(Sample):
    """No sample sheet entry or index for this read."""

    __slots__ = ()

    @property
    def number(self):
        return 0

    def __eq__(self, other):
        return isinstance(other, NoSample)

    def __hash__(self):
        return hash(NoSample)

    def __repr__(self):
        return "NoSample()"


class SampleNumber(Sample):
    """A numbered sample sheet entry, starting from 1."""

    __slots__ = ("_number",)

    def __init__(self, number):
        if number < 1:
            raise ValueError("sample numbers start at 1, not %d" % number)
        self._number = number

    @property
    def number(self):
        return self._number

    def __eq__(self, other):
        return isinstance(other, SampleNumber) and other.number == self.number

    def __hash__(self):
        return hash((SampleNumber, self._number))

    def __repr__(self):
        return "SampleNumber(%d)" % self._number

NO_SAMPLE = NoSample()


class SequenceIdentifier(namedtuple(
        "SequenceIdentifier",
        HEADER_FIELDS + TRAILER_FIELDS,
        defaults=(None,) * len(TRAILER_FIELDS))):
    """A parsed sequence identifier.

    The read, is_filtered, control_number, and sample fields are None when the
    identifier had no second segment.  Note that a control number or sample of
    0 is real information and not the same as None.
    """

    __slots__ = ()

    @property
    def extended(self):
        """Were the read/filter/control/sample fields given?"""
        return self.read is not None

    @property
    def tile_descriptor(self):
        """The four-digit side/swath/tile text, like "2108"."""
        return "%d%d%02d" % (self.side, self.swath, self.tile)

    def __str__(self):
        return format_identifier(self)


def _parse_number(token, field, line=None, minimum=0):
    # int() alone also takes signs, whitespace, underscores and non-ASCII
    # digits.  It can still refuse absurdly long digit strings.
    try:
        if not DIGITS.fullmatch(token):
            raise ValueError(token)
        value = int(token)
    except ValueError as err:
        raise InvalidNumber(
            "%s is not a number: %r" % (field, token), line, field) from err
    if value < minimum:
        raise InvalidNumber(
            "%s must be at least %d: %r" % (field, minimum, token), line, field)
    return value

def _parse_text(token, field, line=None):
    if not token:
        raise EmptyField("%s is empty" % field, line, field)
    return token

def parse_tile_descriptor(token, line=None):
    """Split a four-digit tile descriptor into (side, swath, tile).

    The digits are taken by position, so "2108" gives side 2, swath 1, and
    tile 8.
    """
    if len(token) != 4 or not DIGITS.fullmatch(token):
        raise InvalidTileDescriptor(
            "tile descriptor must be four digits: %r" % token,
            line, "tile_descriptor")
    return int(token[0]), int(token[1]), int(token[2:4])

def _split_segments(line):
    text = line.strip()
    if text.startswith(MARKER):
        text = text[len(MARKER):]
    parts = text.split(None, 1)
    if not parts:
        raise MalformedHeader("empty sequence identifier", line)
    if len(parts) == 1:
        return parts[0], None
    return parts[0], parts[1]

def _parse_header(segment, line):
    tokens = segment.split(":")
    if len(tokens) != 7:
        raise MalformedHeader(
            "expected 7 colon-separated fields, got %d: %r" % (len(tokens), segment),
            line)
    fields = {
        "sequencer_id": _parse_text(tokens[0], "sequencer_id", line),
        "run_count": _parse_number(tokens[1], "run_count", line),
        "flow_cell_id": _parse_text(tokens[2], "flow_cell_id", line),
        "lane": _parse_number(tokens[3], "lane", line, minimum=1)}
    side, swath, tile = parse_tile_descriptor(tokens[4], line)
    fields.update({
        "side": side,
        "swath": swath,
        "tile": tile,
        "x": _parse_number(tokens[5], "x", line),
        "y": _parse_number(tokens[6], "y", line)})
    return fields

def _parse_trailer(segment, line):
    tokens = segment.split(":")
    # Extra whitespace-separated text after the trailer is malformed, too.
    if len(tokens) != 4 or len(segment.split()) != 1:
        raise MalformedTrailer(
            "expected 4 colon-separated fields, got %r" % segment, line)
    read = _parse_number(tokens[0], "read", line, minimum=1)
    try:
        is_filtered = FILTER_FLAGS[tokens[1]]
    except KeyError as err:
        raise InvalidFilterFlag(
            "filter flag must be N or Y: %r" % tokens[1],
            line, "is_filtered") from err
    return {
        "read": read,
        "is_filtered": is_filtered,
        "control_number": _parse_number(tokens[2], "control_number", line),
        "sample": Sample.from_token(tokens[3], line)}

def parse(line):
    """Parse a sequence identifier into a SequenceIdentifier.

    The leading @ and any surrounding whitespace (like the newline from a
    FASTQ file) are optional.  The second, space-separated segment is parsed
    if present; otherwise those fields are left as None.

    Raises an IdentifierError subclass describing the first problem found,
    checking fields left to right.
    """
    header, trailer = _split_segments(line)
    # The header is checked first even if the trailer is also malformed.
    fields = _parse_header(header, line)
    if trailer is not None:
        fields.update(_parse_trailer(trailer, line))
    return SequenceIdentifier(**fields)

def parse_minimal(line):
    """Parse a sequence identifier that must not have a second segment."""
    header, trailer = _split_segments(line)
    fields = _parse_header(header, line)
    if trailer is not None:
        raise MalformedTrailer(
            "unexpected second segment: %r" % trailer, line)
    return SequenceIdentifier(**fields)

def parse_extended(line):
    """Parse a sequence identifier that must have a second segment."""
    header, trailer = _split_segments(line)
    fields = _parse_header(header, line)
    if trailer is None:
        raise MalformedTrailer("missing second segment", line)
    fields.update(_parse_trailer(trailer, line))
    return SequenceIdentifier(**fields)

def format_identifier(seqid, marker=MARKER):
    """Write a SequenceIdentifier back out as identifier text.

    Parsing the result gives back an equal SequenceIdentifier.
    """
    text = "%s%s:%d:%s:%d:%s:%d:%d" % (
        marker or "",
        seqid.sequencer_id,
        seqid.run_count,
        seqid.flow_cell_id,
        seqid.lane,
        seqid.tile_descriptor,
        seqid.x,
        seqid.y)
    if seqid.extended:
        flag = "Y" if seqid.is_filtered else "N"
        text += " %d:%s:%d:%s" % (
            seqid.read, flag, seqid.control_number, seqid.sample)
    return text
