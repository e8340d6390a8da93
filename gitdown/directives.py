"""
# Gitdown: directives.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Directive records and the document state threaded through expansion passes.
"""

from typing import Any

from gitdown.bases import Helper
from gitdown.exceptions import ResolvedMutateException
from gitdown.placeholders import PlaceholderMaster


class Directive:
    """
    A directive discovered in the document.

    Document syntax:
    ````
    <<{"gitdown": "«helper_name»", "«parameter_name»": «json_value», [...]}>>
    ````

    The record outlives the directive's placeholder: it stays in the registry
    until the expansion is over, and `resolved` is flipped exactly once.
    """
    _binding_id: int
    _name: str
    _parameters: dict[str, Any]
    _helper: 'Helper'
    _resolved: bool

    def __init__(self, binding_id: int, name: str, parameters: dict[str, Any], helper: 'Helper'):
        self._binding_id = binding_id
        self._name = name
        self._parameters = parameters
        self._helper = helper
        self._resolved = False

    def __repr__(self) -> str:
        return f'Directive(#{self._binding_id}, {self._name!r}, resolved={self._resolved})'

    @property
    def binding_id(self) -> int:
        return self._binding_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def parameters(self) -> dict[str, Any]:
        return self._parameters

    @property
    def helper(self) -> 'Helper':
        return self._helper

    @property
    def resolved(self) -> bool:
        return self._resolved

    @property
    def placeholder(self) -> str:
        return PlaceholderMaster.bind(self._binding_id)

    def mark_resolved(self):
        if self._resolved:
            raise ResolvedMutateException(f'error: directive #{self._binding_id} has already been resolved')

        self._resolved = True


class DocumentState:
    """
    The unit threaded through every scan and resolution round.

    - `text`: the current document, with unresolved directives standing as placeholders
    - `directives`: every directive discovered so far, in discovery order
    - `discovered_new`: whether the most recent scan discovered at least one directive
    """
    text: str
    directives: list['Directive']
    discovered_new: bool

    def __init__(self, text: str, directives: list['Directive'], discovered_new: bool):
        self.text = text
        self.directives = directives
        self.discovered_new = discovered_new

    def unresolved_directives(self) -> list['Directive']:
        return [directive for directive in self.directives if not directive.resolved]

    def is_fixpoint(self) -> bool:
        return not self.discovered_new and len(self.unresolved_directives()) == 0
