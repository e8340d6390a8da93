"""
# Gitdown: test_scanner.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `scanner.py`.
"""

import unittest

from gitdown.bases import FunctionHelper
from gitdown.directives import Directive
from gitdown.exceptions import MalformedDirectiveException, UnknownHelperException
from gitdown.placeholders import PlaceholderMaster
from gitdown.registry import HelperRegistry
from gitdown.scanner import DirectiveScanner


def build_scanner() -> DirectiveScanner:
    helper_registry = HelperRegistry()
    helper_registry.register_function('upper', lambda markdown, parameters: 'X', priority=0)
    helper_registry.register_function('filesize', lambda markdown, parameters: '1 B', priority=10)

    return DirectiveScanner(helper_registry)


class TestScanner(unittest.TestCase):
    def test_directive_scanner_scan(self):
        scanner = build_scanner()

        scan_result = scanner.scan('A <<{"gitdown":"upper"}>> B', [])
        self.assertEqual(scan_result.text, f'A {PlaceholderMaster.bind(1)} B')
        self.assertTrue(scan_result.discovered_new)
        self.assertEqual(len(scan_result.new_directives), 1)

        directive = scan_result.new_directives[0]
        self.assertEqual(directive.binding_id, 1)
        self.assertEqual(directive.name, 'upper')
        self.assertEqual(directive.parameters, {})
        self.assertEqual(directive.helper.priority(), 0)
        self.assertFalse(directive.resolved)

    def test_directive_scanner_scan_left_to_right(self):
        scan_result = build_scanner().scan(
            '<<{"gitdown": "filesize", "file": "./dist/gitdown.js", "gzip": true}>>\n'
            '<<{"gitdown": "upper"}>>',
            [],
        )
        self.assertEqual(
            scan_result.text,
            f'{PlaceholderMaster.bind(1)}\n{PlaceholderMaster.bind(2)}',
        )
        self.assertEqual(
            [(directive.binding_id, directive.name) for directive in scan_result.new_directives],
            [(1, 'filesize'), (2, 'upper')],
        )
        self.assertEqual(scan_result.new_directives[0].parameters, {'file': './dist/gitdown.js', 'gzip': True})

    def test_directive_scanner_scan_continues_binding_ids(self):
        scanner = build_scanner()
        earlier_directives = [
            Directive(4, 'upper', {}, FunctionHelper(lambda markdown, parameters: 'X', priority=0)),
        ]

        scan_result = scanner.scan('<<{"gitdown": "upper"}>>', earlier_directives)
        self.assertEqual(scan_result.new_directives[0].binding_id, 5)
        self.assertEqual(scan_result.text, PlaceholderMaster.bind(5))
        self.assertEqual(DirectiveScanner.compute_next_binding_id([]), 1)

    def test_directive_scanner_scan_multiline_and_nested_payload(self):
        scan_result = build_scanner().scan(
            'Before\n'
            '<<{\n'
            '    "gitdown": "upper",\n'
            '    "options": {"depth": 2, "tags": ["a", "b"]}\n'
            '}>>\n'
            'After',
            [],
        )
        self.assertEqual(scan_result.text, f'Before\n{PlaceholderMaster.bind(1)}\nAfter')
        self.assertEqual(scan_result.new_directives[0].parameters, {'options': {'depth': 2, 'tags': ['a', 'b']}})

    def test_directive_scanner_scan_unterminated_opening(self):
        scan_result = build_scanner().scan('x <<{ y\n<<{"gitdown":"upper"}>>', [])
        self.assertEqual(scan_result.text, f'x <<{{ y\n{PlaceholderMaster.bind(1)}')
        self.assertEqual([directive.name for directive in scan_result.new_directives], ['upper'])

    def test_directive_scanner_scan_without_directives(self):
        scanner = build_scanner()

        for text in [
            '',
            'Plain markdown.',
            'Shifts like a << b >> c are left alone.',
            'So is << {"gitdown": "upper"} >> with spaces.',
            'And <<["gitdown", "upper"]>>.',
        ]:
            scan_result = scanner.scan(text, [])
            self.assertEqual(scan_result.text, text)
            self.assertFalse(scan_result.discovered_new)
            self.assertEqual(scan_result.new_directives, [])

    def test_directive_scanner_scan_is_idempotent(self):
        scanner = build_scanner()

        first_scan_result = scanner.scan('A <<{"gitdown": "upper"}>> B', [])
        second_scan_result = scanner.scan(first_scan_result.text, first_scan_result.new_directives)
        self.assertEqual(second_scan_result.text, first_scan_result.text)
        self.assertFalse(second_scan_result.discovered_new)

    def test_directive_scanner_parse_payload(self):
        self.assertEqual(
            DirectiveScanner.parse_payload('{"gitdown": "include", "file": "README.md"}'),
            ('include', {'file': 'README.md'}),
        )

    def test_directive_scanner_scan_malformed(self):
        scanner = build_scanner()

        with self.assertRaises(MalformedDirectiveException) as context_manager:
            scanner.scan('<<{not json}>>', [])
        self.assertEqual(context_manager.exception.payload, '{not json}')

        with self.assertRaises(MalformedDirectiveException) as context_manager:
            scanner.scan('<<{"name": "upper"}>>', [])
        self.assertIn('gitdown', context_manager.exception.reason)

        self.assertRaises(MalformedDirectiveException, scanner.scan, '<<{"gitdown": 1}>>', [])
        self.assertRaises(MalformedDirectiveException, scanner.scan, '<<{}>>', [])

    def test_directive_scanner_scan_unknown_helper(self):
        with self.assertRaises(UnknownHelperException) as context_manager:
            build_scanner().scan('a <<{"gitdown": "upper"}>> b <<{"gitdown": "nope"}>>', [])
        self.assertEqual(context_manager.exception.helper_name, 'nope')
        self.assertEqual(context_manager.exception.binding_id, 2)


if __name__ == '__main__':
    unittest.main()
