"""
# Gitdown: bases.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Base classes for helpers.
"""

import abc
import os
from typing import Any, Awaitable, Callable, Optional, Union

from gitdown.exceptions import MissingParameterException
from gitdown.utilities import locate_repository_root


class Helper(abc.ABC):
    """
    Base class for a helper, the capability resolving directives of a given name.

    Document syntax:
    ````
    <<{"gitdown": "«helper_name»", [...]}>>
    ````

    Among the unresolved directives, those whose helper has the numerically lowest `priority()`
    are resolved first, concurrently, in a single round.
    A helper carries no per-call mutable state;
    its only effect on the document is the string returned by `invoke(...)`.
    """
    @abc.abstractmethod
    def priority(self) -> Union[int, float]:
        """
        Return the priority of the helper (lower resolves earlier).

        Must be pure and deterministic.
        """
        raise NotImplementedError

    @abc.abstractmethod
    def invoke(self, markdown: str, parameters: dict[str, Any]) -> Union[str, Awaitable[str]]:
        """
        Compute the replacement text for a directive.

        `markdown` is the current document (with unresolved directives standing as placeholders),
        and `parameters` are the directive's keys other than `gitdown`.
        May return the string directly or an awaitable resolving to it.
        """
        raise NotImplementedError


class FunctionHelper(Helper):
    """
    A helper wrapping a plain function (or coroutine function) with a fixed priority.
    """
    _function: Callable[[str, dict[str, Any]], Union[str, Awaitable[str]]]
    _priority: Union[int, float]

    def __init__(self, function: Callable[[str, dict[str, Any]], Union[str, Awaitable[str]]],
                 priority: Union[int, float]):
        self._function = function
        self._priority = priority

    def priority(self) -> Union[int, float]:
        return self._priority

    def invoke(self, markdown: str, parameters: dict[str, Any]) -> Union[str, Awaitable[str]]:
        return self._function(markdown, parameters)


class HelperWithRepositoryFiles(Helper, abc.ABC):
    """
    Base class for a helper reading files relative to the repository root.

    Document syntax:
    ````
    <<{"gitdown": "«helper_name»", "file": "«file_name»", [...]}>>
    ````

    If no repository path is given, the repository root is located from the working directory
    at invocation time.
    """
    _repository_path: Optional[str]

    def __init__(self, repository_path: Optional[str] = None):
        self._repository_path = repository_path

    @property
    @abc.abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @property
    def repository_path(self) -> str:
        if self._repository_path is None:
            return locate_repository_root(os.getcwd())

        return self._repository_path

    def extract_required_parameter(self, parameters: dict[str, Any], parameter_name: str) -> Any:
        try:
            return parameters[parameter_name]
        except KeyError:
            raise MissingParameterException(self.name, parameter_name)

    def resolve_file_name(self, file_name: str) -> str:
        return os.path.normpath(os.path.join(self.repository_path, file_name))
