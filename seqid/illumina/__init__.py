"""
Package to help parse Illumina data formats.

This provides the identifier module, which parses the sequence identifier line
at the top of each FASTQ record into a SequenceIdentifier.  Everything here is
read-only.
"""
