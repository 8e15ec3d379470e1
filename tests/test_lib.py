import unittest
import sys
import os

# Adjust path to import pfhardening
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from pfhardening import lib


class TestLoadClass(unittest.TestCase):

    def test_load_class_valid(self):
        loaded_class = lib._load_class("collections.UserList")
        from collections import UserList
        self.assertIs(loaded_class, UserList)

    def test_load_class_invalid_module(self):
        with self.assertRaises(ImportError):
            lib._load_class("nonexistentmodule.NonExistentClass")

    def test_load_class_invalid_class(self):
        with self.assertRaises(AttributeError):
            lib._load_class("collections.NonExistentClassInCollections")


class TestIncludeBlock(unittest.TestCase):

    def test_include_block(self):
        self.assertEqual(
            lib.include_block("pf-hardening", "/etc/pf.anchors/pf-hardening"),
            "# Load custom security rules from 'pf-hardening' anchor\n"
            'anchor "pf-hardening"\n'
            'load anchor "pf-hardening" from "/etc/pf.anchors/pf-hardening"\n',
        )

    def test_anchor_reference(self):
        self.assertEqual(lib.anchor_reference("pf-hardening"), 'anchor "pf-hardening"')

    def test_patterns_escape_name(self):
        patterns = lib.include_patterns("a.b")
        content = 'anchor "a.b"\nanchor "axb"\n'
        self.assertEqual(lib.remove_matching_lines(content, patterns), 'anchor "axb"\n')


class TestRemoveMatchingLines(unittest.TestCase):

    PATTERNS = lib.include_patterns("pf-hardening")

    def test_removes_include_block(self):
        content = (
            'set skip on lo0\n'
            "# Load custom security rules from 'pf-hardening' anchor\n"
            'anchor "pf-hardening"\n'
            'load anchor "pf-hardening" from "/etc/pf.anchors/pf-hardening"\n'
            'pass out all\n'
        )
        self.assertEqual(
            lib.remove_matching_lines(content, self.PATTERNS),
            'set skip on lo0\npass out all\n',
        )

    def test_removes_every_occurrence(self):
        content = 'anchor "pf-hardening"\nblock all\nanchor "pf-hardening"\n'
        self.assertEqual(lib.remove_matching_lines(content, self.PATTERNS), 'block all\n')

    def test_matches_inside_line(self):
        content = '  anchor "pf-hardening" # indented\nblock all\n'
        self.assertEqual(lib.remove_matching_lines(content, self.PATTERNS), 'block all\n')

    def test_leaves_other_anchors(self):
        content = 'anchor "com.apple/*"\nload anchor "com.apple" from "/etc/pf.anchors/com.apple"\n'
        self.assertEqual(lib.remove_matching_lines(content, self.PATTERNS), content)

    def test_no_trailing_newline(self):
        self.assertEqual(
            lib.remove_matching_lines('block all\nanchor "pf-hardening"', self.PATTERNS),
            'block all\n',
        )
        self.assertEqual(
            lib.remove_matching_lines('anchor "pf-hardening"\nblock all', self.PATTERNS),
            'block all',
        )

    def test_empty(self):
        self.assertEqual(lib.remove_matching_lines('', self.PATTERNS), '')

    def test_keeps_crlf(self):
        content = 'block all\r\nanchor "pf-hardening"\r\n'
        self.assertEqual(lib.remove_matching_lines(content, self.PATTERNS), 'block all\r\n')


class TestExecutionFailed(unittest.TestCase):

    def test_message(self):
        error = lib.ExecutionFailed(['pfctl', '-f', '/etc/pf.conf'], 1)
        self.assertEqual(
            str(error), "Execution failed: pfctl -f /etc/pf.conf (exit status 1)"
        )
        self.assertEqual(error.returncode, 1)


if __name__ == '__main__':
    unittest.main()
