"""
Unit tests and supporting files for seqid.

The package structure of test_seqid mirrors the package structure of seqid,
with one or more test cases per class and sometimes dedicated cases for
modules or helper functions.  When test cases need supporting files (input
used to run a test, or expected output for comparison with results) they refer
to a path within test_seqid/data/<path> where <path> corresponds to the
location of the test case code.  This is handled by TestBase.

There's a small test_config.yml at the top of the repository that can control
some aspects of the testing.
"""
