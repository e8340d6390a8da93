"""
# Gitdown: test_directives.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `directives.py`.
"""

import unittest

from gitdown.bases import FunctionHelper
from gitdown.directives import Directive, DocumentState
from gitdown.exceptions import ResolvedMutateException
from gitdown.placeholders import PlaceholderMaster


def build_directive(binding_id: int) -> Directive:
    return Directive(binding_id, 'upper', {}, FunctionHelper(lambda markdown, parameters: 'X', priority=0))


class TestDirectives(unittest.TestCase):
    def test_directive_mark_resolved(self):
        directive = build_directive(1)
        self.assertFalse(directive.resolved)

        directive.mark_resolved()
        self.assertTrue(directive.resolved)
        self.assertRaises(ResolvedMutateException, directive.mark_resolved)

    def test_directive_placeholder(self):
        self.assertEqual(build_directive(7).placeholder, PlaceholderMaster.bind(7))

    def test_document_state_is_fixpoint(self):
        resolved_directive = build_directive(1)
        resolved_directive.mark_resolved()
        unresolved_directive = build_directive(2)

        self.assertTrue(DocumentState('', [], discovered_new=False).is_fixpoint())
        self.assertTrue(DocumentState('', [resolved_directive], discovered_new=False).is_fixpoint())
        self.assertFalse(DocumentState('', [resolved_directive], discovered_new=True).is_fixpoint())
        self.assertFalse(
            DocumentState('', [resolved_directive, unresolved_directive], discovered_new=False).is_fixpoint()
        )
        self.assertEqual(
            DocumentState('', [resolved_directive, unresolved_directive], False).unresolved_directives(),
            [unresolved_directive],
        )


if __name__ == '__main__':
    unittest.main()
