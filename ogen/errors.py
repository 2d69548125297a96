"""Errors raised by the generator and helpers to classify them."""

from __future__ import annotations

import json
from typing import Callable, Iterable, TypeVar

E = TypeVar("E", bound=BaseException)


class GeneratorError(Exception):
    """Base class of generator errors."""


class NotImplementedFeatureError(GeneratorError):
    """A feature of the specification that is not supported."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name} not implemented")
        self.name = name


class UnsupportedContentTypesError(GeneratorError):
    """None of the given content types is supported."""

    def __init__(self, content_types: Iterable[str]) -> None:
        self.content_types = list(content_types)
        super().__init__(f"unsupported content types: [{', '.join(self.content_types)}]")


class _WrappingError(GeneratorError):
    prefix = ""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"{self.prefix}: {cause}")
        self.cause = cause
        self.__cause__ = cause


class ParseSpecError(_WrappingError):
    """Specification parsing failed."""

    prefix = "parse spec"


class BuildRouterError(_WrappingError):
    """Route tree building failed."""

    prefix = "build router"


class GoFormatError(_WrappingError):
    """Formatting of generated code failed."""

    prefix = "goimports"


def _find(err: BaseException | None, cls: type[E]) -> E | None:
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        if isinstance(err, cls):
            return err
        seen.add(id(err))
        err = err.__cause__
    return None


def _feature_name(err: BaseException) -> str | None:
    found = _find(err, NotImplementedFeatureError)
    if found is not None:
        return found.name
    if _find(err, UnsupportedContentTypesError) is not None:
        return "unsupported content types"
    return None


def filter_not_implemented(
    err: BaseException | None,
    ignore: Iterable[str] = (),
    hook: Callable[[str, BaseException], None] | None = None,
) -> BaseException | None:
    """Return ``err`` unless it is an unimplemented feature that is ignored.

    ``ignore`` may contain feature names or ``"all"``. ``hook`` is called
    for every unimplemented-feature error, ignored or not.
    """
    if err is None:
        return None
    name = _feature_name(err)
    if name is None:
        return err
    if hook is not None:
        hook(name, err)
    ignored = set(ignore)
    if "all" in ignored or name in ignored:
        return None
    return err


def not_implemented_message(err: BaseException) -> tuple[str, str] | None:
    """Return a user message and feature name for an unimplemented feature."""
    found = _find(err, NotImplementedFeatureError)
    if found is not None:
        msg = f"Feature {json.dumps(found.name)} is not implemented yet.\n"
        return msg, found.name
    ct = _find(err, UnsupportedContentTypesError)
    if ct is not None:
        if len(ct.content_types) == 1:
            msg = f"Content type {json.dumps(ct.content_types[0])} is unsupported.\n"
        else:
            msg = f"Content types [{', '.join(ct.content_types)}] are unsupported.\n"
        return msg, "unsupported content types"
    return None