"""
Tests for the seqid.illumina sub-package.
"""
