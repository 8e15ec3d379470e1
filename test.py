#!/usr/bin/env python3
""" Run the pfhardening test suite without installing anything """
import os
import sys
import unittest

if __name__ == "__main__":
    here = os.path.dirname(os.path.abspath(__file__))

    # Discover tests/test*.py with the repository root importable, so the
    # test modules can share tests.test_helper
    loader = unittest.TestLoader()
    suite = loader.discover(os.path.join(here, "tests"), top_level_dir=here)

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    sys.exit(0 if result.wasSuccessful() else 1)
