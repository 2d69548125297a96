"""Generator features and feature sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


@dataclass(frozen=True)
class Feature:
    """A named, optional generator capability."""

    name: str
    description: str


PATHS_CLIENT = Feature("paths/client", "Enables paths client generation")
PATHS_SERVER = Feature("paths/server", "Enables paths server generation")
WEBHOOKS_CLIENT = Feature("webhooks/client", "Enables webhooks client generation")
WEBHOOKS_SERVER = Feature("webhooks/server", "Enables webhooks server generation")
CLIENT_SECURITY_REENTRANT = Feature(
    "client/security/reentrant",
    "Enables client usage in security source implementations",
)
CLIENT_REQUEST_VALIDATION = Feature(
    "client/request/validation", "Enables validation of client requests"
)
SERVER_RESPONSE_VALIDATION = Feature(
    "server/response/validation", "Enables validation of server responses"
)
OGEN_OTEL = Feature("ogen/otel", "Enables OpenTelemetry integration")
OGEN_UNIMPLEMENTED = Feature("ogen/unimplemented", "Enables stub Handler generation")
DEBUG_EXAMPLE_TESTS = Feature("debug/example_tests", "Enables example tests generation")

DEFAULT_FEATURES: tuple[Feature, ...] = (
    PATHS_CLIENT,
    PATHS_SERVER,
    WEBHOOKS_CLIENT,
    WEBHOOKS_SERVER,
    OGEN_OTEL,
    OGEN_UNIMPLEMENTED,
)

ALL_FEATURES: tuple[Feature, ...] = (
    PATHS_CLIENT,
    PATHS_SERVER,
    WEBHOOKS_CLIENT,
    WEBHOOKS_SERVER,
    CLIENT_SECURITY_REENTRANT,
    CLIENT_REQUEST_VALIDATION,
    SERVER_RESPONSE_VALIDATION,
    OGEN_OTEL,
    OGEN_UNIMPLEMENTED,
    DEBUG_EXAMPLE_TESTS,
)

_KNOWN = frozenset(f.name for f in ALL_FEATURES)


class FeatureSet(set):
    """A set of feature names."""

    def enable(self, name: str) -> None:
        """Add a feature by name; raise ``ValueError`` if it is unknown."""
        if name not in _KNOWN:
            raise ValueError(f'unknown feature "{name}"')
        self.add(name)

    def disable(self, name: str) -> None:
        self.discard(name)

    def has(self, feature: Feature) -> bool:
        return feature.name in self

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "FeatureSet":
        result = cls()
        for name in names:
            result.enable(name)
        return result


@dataclass
class FeatureOptions:
    """Feature selection as written in the configuration."""

    enable: set[str] = field(default_factory=set)
    disable: set[str] = field(default_factory=set)
    disable_all: bool = False

    def build(self) -> FeatureSet:
        """Return the final set: defaults, minus disabled, plus enabled."""
        result = FeatureSet()
        if not self.disable_all:
            for feature in DEFAULT_FEATURES:
                result.enable(feature.name)
        for name in self.disable:
            result.disable(name)
        for name in self.enable:
            result.enable(name)
        return result