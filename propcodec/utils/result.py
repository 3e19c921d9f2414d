#  Copyright 2025 Hathor Labs
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#  http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.

"""
A simple `Result` type inspired by Rust.

Only the methods that make sense for the codec are implemented. Decoding returns `Ok(value)` on success and
`Err(error)` on bad input, which lets callers pattern match on the outcome:

>>> def describe(result: Result[int, str]) -> str:
...     match result:
...         case Ok(value):
...             return f'ok: {value}'
...         case Err(error):
...             return f'error: {error}'
>>> describe(Ok(42))
'ok: 42'
>>> describe(Err('boom'))
'error: boom'
"""

from __future__ import annotations

import functools
import traceback
from typing import Any, Callable, Generic, Literal, NoReturn, ParamSpec, TypeAlias, TypeVar

T = TypeVar('T', covariant=True)  # Success type
E = TypeVar('E', covariant=True)  # Error type
U = TypeVar('U')
P = ParamSpec('P')


class Ok(Generic[T]):
    """
    A value that indicates success and which stores arbitrary data for the return value.
    """

    __slots__ = ('_value',)
    __match_args__ = ('_value',)

    def __init__(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f'Ok({self._value!r})'

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Ok) and self._value == other._value

    def __ne__(self, other: Any) -> bool:
        return not (self == other)

    def __hash__(self) -> int:
        return hash((True, self._value))

    def is_ok(self) -> Literal[True]:
        return True

    def is_err(self) -> Literal[False]:
        return False

    def ok(self) -> T:
        """
        Return the value.
        """
        return self._value

    def err(self) -> None:
        """
        Return `None`.
        """
        return None

    def unwrap(self) -> T:
        """
        Return the value.
        """
        return self._value

    def unwrap_or(self, _default: U) -> T:
        """
        Return the value.
        """
        return self._value

    def unwrap_or_propagate(self) -> T:
        """
        Return the value.
        """
        return self._value


class Err(Generic[E]):
    """
    A value that signifies failure and which stores arbitrary data for the error.
    """

    __slots__ = ('_value', 'traceback')
    __match_args__ = ('_value',)

    def __init__(self, value: E, cause: Exception | None = None) -> None:
        self._value = value
        self.traceback: str | None = None

        if cause is not None:
            # when a cause is provided, we use it.
            assert cause.__traceback__ is not None, 'cause must only be used from a try-except context'
            if isinstance(value, Exception) and value.__cause__ is None:
                value.__cause__ = cause
            self.traceback = ''.join(traceback.format_exception(cause))

    def __repr__(self) -> str:
        return f'Err({self._value!r})'

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Err) and self._value == other._value

    def __ne__(self, other: Any) -> bool:
        return not (self == other)

    def __hash__(self) -> int:
        return hash((False, self._value))

    def is_ok(self) -> Literal[False]:
        return False

    def is_err(self) -> Literal[True]:
        return True

    def ok(self) -> None:
        """
        Return `None`.
        """
        return None

    def err(self) -> E:
        """
        Return the error.
        """
        return self._value

    def unwrap(self) -> NoReturn:
        """
        Raises an `UnwrapError`.
        """
        exc = UnwrapError(
            self,
            f'Called `Result.unwrap()` on an `Err` value: {self._value!r}',
        )
        if isinstance(self._value, BaseException):
            raise exc from self._value
        raise exc

    def unwrap_or(self, default: U) -> U:
        """
        Return `default`.
        """
        return default

    def unwrap_or_propagate(self) -> NoReturn:
        """
        The contained result is ``Err``, raise _ResultPropagationException with self.
        """
        raise _ResultPropagationException(self)


Result: TypeAlias = Ok[T] | Err[E]


class UnwrapError(Exception):
    """
    Exception raised from `.unwrap_*` calls.

    The original `Result` can be accessed via the `.result` attribute, but
    this is not intended for regular use, as type information is lost.
    """

    _result: Result[Any, Any]

    def __init__(self, result: Result[Any, Any], message: str) -> None:
        super().__init__(message)
        self._result = result

    @property
    def result(self) -> Result[Any, Any]:
        """
        Returns the original result.
        """
        return self._result


class _ResultPropagationException(Exception):
    def __init__(self, err: Err[E]) -> None:
        super().__init__('did you forget to annotate the function/method with `@propagate_result`?')
        self.err = err


def propagate_result(f: Callable[P, Result[T, E]]) -> Callable[P, Result[T, E]]:
    """
    Decorator to turn a function into one that allows using unwrap_or_propagate.
    """
    @functools.wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, E]:
        try:
            return f(*args, **kwargs)
        except _ResultPropagationException as e:
            return e.err  # type: ignore[return-value]

    return wrapper

