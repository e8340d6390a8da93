"""
# Gitdown: registry.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Registry of helpers by name.
"""

import copy
from typing import Any, Awaitable, Callable, Union

from gitdown.bases import FunctionHelper, Helper
from gitdown.exceptions import CommittedMutateException, DuplicateHelperException, UnknownHelperException


class HelperRegistry:
    """
    Object mapping helper names (the value of the `gitdown` key in a directive) to helpers.

    Helpers are added by registration.
    Once committed, the registry is read-only.
    A resolution authority works on a committed copy (see `committed_copy()`),
    so the registry passed to it stays open to further registration.
    """
    _helper_from_name: dict[str, 'Helper']
    _is_committed: bool

    def __init__(self):
        self._helper_from_name = {}
        self._is_committed = False

    @property
    def names(self) -> list[str]:
        return sorted(self._helper_from_name)

    def register(self, name: str, helper: 'Helper'):
        if self._is_committed:
            raise CommittedMutateException('error: cannot call `register(...)` after `commit()`')

        if name in self._helper_from_name:
            raise DuplicateHelperException(name)

        self._helper_from_name[name] = helper

    def register_function(self, name: str, function: Callable[[str, dict[str, Any]], Union[str, Awaitable[str]]],
                          priority: Union[int, float]):
        self.register(name, FunctionHelper(function, priority))

    def load(self, name: str) -> 'Helper':
        try:
            return self._helper_from_name[name]
        except KeyError:
            raise UnknownHelperException(name)

    def commit(self):
        self._is_committed = True

    def committed_copy(self) -> 'HelperRegistry':
        helper_registry = HelperRegistry()
        helper_registry._helper_from_name = copy.copy(self._helper_from_name)
        helper_registry.commit()

        return helper_registry
