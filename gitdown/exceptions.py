"""
# Gitdown: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""

from typing import Optional


class CommittedMutateException(Exception):
    pass


class DuplicateHelperException(Exception):
    _helper_name: str

    def __init__(self, helper_name: str):
        super().__init__(f'error: helper `{helper_name}` is already registered')
        self._helper_name = helper_name

    @property
    def helper_name(self) -> str:
        return self._helper_name


class ResolvedMutateException(Exception):
    pass


class RepositoryNotFoundException(Exception):
    _start_path: str

    def __init__(self, start_path: str):
        super().__init__(f'error: `.git` path cannot be located from `{start_path}`')
        self._start_path = start_path

    @property
    def start_path(self) -> str:
        return self._start_path


class MissingParameterException(Exception):
    _helper_name: str
    _parameter_name: str

    def __init__(self, helper_name: str, parameter_name: str):
        super().__init__(f'error: helper `{helper_name}` requires parameter `{parameter_name}`')
        self._helper_name = helper_name
        self._parameter_name = parameter_name

    @property
    def helper_name(self) -> str:
        return self._helper_name

    @property
    def parameter_name(self) -> str:
        return self._parameter_name


class ExpansionException(Exception):
    """
    Base class for errors that abort the expansion of a document.
    """
    pass


class MalformedDirectiveException(ExpansionException):
    _payload: str
    _reason: str

    def __init__(self, payload: str, reason: str):
        super().__init__(f'error: malformed directive `<<{payload}>>`: {reason}')
        self._payload = payload
        self._reason = reason

    @property
    def payload(self) -> str:
        return self._payload

    @property
    def reason(self) -> str:
        return self._reason


class UnknownHelperException(ExpansionException):
    _helper_name: str
    _binding_id: Optional[int]

    def __init__(self, helper_name: str, binding_id: Optional[int] = None):
        if binding_id is None:
            message = f'error: unknown helper `{helper_name}`'
        else:
            message = f'error: directive #{binding_id}: unknown helper `{helper_name}`'

        super().__init__(message)
        self._helper_name = helper_name
        self._binding_id = binding_id

    @property
    def helper_name(self) -> str:
        return self._helper_name

    @property
    def binding_id(self) -> Optional[int]:
        return self._binding_id


class HelperInvocationException(ExpansionException):
    _binding_id: int
    _helper_name: str
    _cause: BaseException

    def __init__(self, binding_id: int, helper_name: str, cause: BaseException):
        super().__init__(f'error: directive #{binding_id}: helper `{helper_name}` failed: {cause}')
        self._binding_id = binding_id
        self._helper_name = helper_name
        self._cause = cause

    @property
    def binding_id(self) -> int:
        return self._binding_id

    @property
    def helper_name(self) -> str:
        return self._helper_name

    @property
    def cause(self) -> BaseException:
        return self._cause


class IterationLimitExceededException(ExpansionException):
    _max_iterations: int

    def __init__(self, max_iterations: int):
        super().__init__(f'error: fixpoint not reached within {max_iterations} iteration(s)')
        self._max_iterations = max_iterations

    @property
    def max_iterations(self) -> int:
        return self._max_iterations
