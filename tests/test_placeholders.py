"""
# Gitdown: test_placeholders.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `placeholders.py`.
"""

import unittest

from gitdown.placeholders import PlaceholderMaster


class TestPlaceholders(unittest.TestCase):
    def test_placeholder_master_protect(self):
        self.assertEqual(PlaceholderMaster.protect(''), '\uF8FF\uF8FF')
        self.assertEqual(PlaceholderMaster.protect('$'), '\uF8FF\uE024\uF8FF')
        self.assertEqual(PlaceholderMaster.protect('\uF8FF'), '\uF8FF\uE0EF\uE0A3\uE0BF\uF8FF')

    def test_placeholder_master_unprotect(self):
        self.assertEqual(PlaceholderMaster.unprotect('\uF8FF\uF8FF'), '')
        self.assertEqual(PlaceholderMaster.unprotect('\uF8FF\uE024\uF8FF'), '$')
        self.assertEqual(PlaceholderMaster.unprotect('a \uF8FF\uE031\uE032\uF8FF b'), 'a 12 b')

    def test_placeholder_master_bind(self):
        self.assertEqual(PlaceholderMaster.bind(1), '\uF8FF\uE031\uF8FF')
        self.assertEqual(PlaceholderMaster.bind(12), '\uF8FF\uE031\uE032\uF8FF')
        self.assertNotIn('<', PlaceholderMaster.bind(1234567890))
        self.assertNotIn('{', PlaceholderMaster.bind(1234567890))

    def test_placeholder_master_replace_marker_occurrences(self):
        protected = PlaceholderMaster.replace_marker_occurrences('a\uF8FFb\uF8FFc')
        self.assertEqual(
            protected,
            'a\uF8FF\uE0EF\uE0A3\uE0BF\uF8FFb'
            '\uF8FF\uE0EF\uE0A3\uE0BF\uF8FFc',
        )
        self.assertEqual(PlaceholderMaster.unprotect(protected), 'a\uF8FFb\uF8FFc')
        self.assertEqual(PlaceholderMaster.replace_marker_occurrences('no marker'), 'no marker')

    def test_placeholder_master_extract_binding_ids(self):
        string = (
            f'x {PlaceholderMaster.bind(3)} '
            f'{PlaceholderMaster.replace_marker_occurrences(PlaceholderMaster.MARKER)} '
            f'{PlaceholderMaster.bind(10)}'
        )
        self.assertEqual(PlaceholderMaster.extract_binding_ids(string), [3, 10])
        self.assertEqual(PlaceholderMaster.extract_binding_ids('nothing here'), [])

    def test_placeholder_master_substitute_binding(self):
        string = f'a {PlaceholderMaster.bind(1)} b {PlaceholderMaster.bind(2)}'
        self.assertEqual(
            PlaceholderMaster.substitute_binding(string, 1, 'X'),
            (f'a X b {PlaceholderMaster.bind(2)}', 1),
        )
        self.assertEqual(PlaceholderMaster.substitute_binding(string, 3, 'X'), (string, 0))

        straddling_string = f'{PlaceholderMaster.bind(2)}\uE031{PlaceholderMaster.bind(3)}'
        self.assertIn(PlaceholderMaster.bind(1), straddling_string)
        self.assertEqual(PlaceholderMaster.substitute_binding(straddling_string, 1, 'X'), (straddling_string, 0))
        self.assertEqual(
            PlaceholderMaster.substitute_binding(straddling_string, 3, 'X'),
            (f'{PlaceholderMaster.bind(2)}\uE031X', 1),
        )

    def test_placeholder_master_cannot_be_instantiated(self):
        self.assertRaises(TypeError, PlaceholderMaster)


if __name__ == '__main__':
    unittest.main()
