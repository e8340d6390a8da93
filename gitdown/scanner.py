"""
# Gitdown: scanner.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Directive discovery.

A directive is a JSON object wrapped in double angle-brackets:
````
<<{"gitdown": "«helper_name»", "«parameter_name»": «json_value», [...]}>>
````
The object runs from `<<{` to the first following `}>>`, and may span lines,
but may not contain `<<`, so a stray `<<{` cannot swallow the directives after it.
"""

import json
import re
from typing import NamedTuple

from gitdown.constants import DIRECTIVE_DISCRIMINATOR_KEY
from gitdown.directives import Directive
from gitdown.exceptions import MalformedDirectiveException, UnknownHelperException
from gitdown.registry import HelperRegistry


class DirectiveScanner:
    """
    Object replacing directives with placeholders.

    Scanning is a pure function of the text and the next binding identifier,
    the latter being one more than that of the last directive already discovered (or 1 if none).
    Since placeholders cannot be matched as directives, no directive is ever discovered twice.
    """
    _helper_registry: 'HelperRegistry'

    _DIRECTIVE_PATTERN_COMPILED = re.compile(
        pattern=r'''
            [<]{2}
                (?P<payload> [{] (?: (?! [<]{2} ) [\s\S] )*? [}] )
            [>]{2}
        ''',
        flags=re.VERBOSE,
    )

    def __init__(self, helper_registry: 'HelperRegistry'):
        self._helper_registry = helper_registry

    @staticmethod
    def compute_next_binding_id(directives: list['Directive']) -> int:
        if len(directives) == 0:
            return 1

        return directives[-1].binding_id + 1

    @staticmethod
    def parse_payload(payload: str) -> tuple[str, dict]:
        """
        Parse a directive payload into helper name and parameters.
        """
        try:
            command = json.loads(payload)
        except json.JSONDecodeError as json_decode_error:
            raise MalformedDirectiveException(payload, f'invalid JSON ({json_decode_error})') from json_decode_error

        if not isinstance(command, dict):
            raise MalformedDirectiveException(payload, 'payload is not a JSON object')

        try:
            name = command.pop(DIRECTIVE_DISCRIMINATOR_KEY)
        except KeyError:
            raise MalformedDirectiveException(payload, f'missing key `{DIRECTIVE_DISCRIMINATOR_KEY}`')

        if not isinstance(name, str):
            raise MalformedDirectiveException(payload, f'value of `{DIRECTIVE_DISCRIMINATOR_KEY}` is not a string')

        return name, command

    def scan(self, text: str, directives: list['Directive']) -> 'ScanResult':
        binding_id = DirectiveScanner.compute_next_binding_id(directives)
        new_directives: list['Directive'] = []

        def substitute_function(directive_match: re.Match) -> str:
            nonlocal binding_id

            name, parameters = DirectiveScanner.parse_payload(directive_match.group('payload'))

            try:
                helper = self._helper_registry.load(name)
            except UnknownHelperException:
                raise UnknownHelperException(name, binding_id) from None

            directive = Directive(binding_id, name, parameters, helper)
            new_directives.append(directive)
            binding_id += 1

            return directive.placeholder

        text = DirectiveScanner._DIRECTIVE_PATTERN_COMPILED.sub(substitute_function, text)

        return ScanResult(text, new_directives, discovered_new=len(new_directives) > 0)


class ScanResult(NamedTuple):
    text: str
    new_directives: list['Directive']
    discovered_new: bool
