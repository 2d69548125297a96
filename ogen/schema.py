"""Fluent builders for OpenAPI schema objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


def escape_ref(ref: str) -> str:
    """Escape a name for use in a JSON pointer (RFC 6901)."""
    return ref.replace("~", "~0").replace("/", "~1")


@dataclass
class Discriminator:
    """Discriminator of a polymorphic schema."""

    property_name: str = ""
    mapping: dict[str, str] = field(default_factory=dict)


@dataclass
class Items:
    """Items of an array schema: one schema, or a tuple of schemas."""

    item: Schema | None = None
    items: list[Schema] = field(default_factory=list)


@dataclass
class Property:
    """A named property of an object schema."""

    name: str = ""
    schema: Schema | None = None

    def set_name(self, name: str) -> Property:
        self.name = name
        return self

    def set_schema(self, schema: Schema | None) -> Property:
        self.schema = schema
        return self


@dataclass
class Schema:
    """An OpenAPI schema object.

    Numeric bounds, enum values and the default are kept as raw JSON text.
    """

    ref: str = ""
    summary: str = ""
    description: str = ""
    type: str = ""
    format: str = ""
    properties: list[Property] = field(default_factory=list)
    required: list[str] = field(default_factory=list)
    items: Items | None = None
    nullable: bool = False
    all_of: list[Schema] = field(default_factory=list)
    one_of: list[Schema] = field(default_factory=list)
    any_of: list[Schema] = field(default_factory=list)
    discriminator: Discriminator | None = None
    enum: list[str] = field(default_factory=list)
    multiple_of: str = ""
    maximum: str = ""
    exclusive_maximum: bool = False
    minimum: str = ""
    exclusive_minimum: bool = False
    max_length: int | None = None
    min_length: int | None = None
    pattern: str = ""
    max_items: int | None = None
    min_items: int | None = None
    unique_items: bool = False
    max_properties: int | None = None
    min_properties: int | None = None
    default: str | None = None
    deprecated: bool = False

    def set_ref(self, ref: str) -> Schema:
        self.ref = ref
        return self

    def set_summary(self, summary: str) -> Schema:
        self.summary = summary
        return self

    def set_description(self, description: str) -> Schema:
        self.description = description
        return self

    def set_type(self, type_: str) -> Schema:
        self.type = type_
        return self

    def set_format(self, format_: str) -> Schema:
        self.format = format_
        return self

    def set_properties(self, properties: Iterable[Property] | None) -> Schema:
        """Make this an object schema with the given properties."""
        self.type = "object"
        if properties is not None:
            self.properties = list(properties)
        return self

    def add_optional_properties(self, *args: Property | None) -> Schema:
        """Make this an object schema and append the given properties."""
        self.type = "object"
        self.properties.extend(p for p in args if p is not None)
        return self

    def add_required_properties(self, *args: Property | None) -> Schema:
        """Append the given properties and mark them as required."""
        self.add_optional_properties(*args)
        self.required.extend(p.name for p in args if p is not None)
        return self

    def set_required(self, required: Iterable[str] | None) -> Schema:
        self.required = list(required) if required is not None else []
        return self

    def set_items(self, item: Schema | None) -> Schema:
        self.items = Items(item=item)
        return self

    def set_nullable(self, nullable: bool) -> Schema:
        self.nullable = nullable
        return self

    def set_all_of(self, schemas: Iterable[Schema] | None) -> Schema:
        self.all_of = list(schemas or ())
        return self

    def set_one_of(self, schemas: Iterable[Schema] | None) -> Schema:
        self.one_of = list(schemas or ())
        return self

    def set_any_of(self, schemas: Iterable[Schema] | None) -> Schema:
        self.any_of = list(schemas or ())
        return self

    def set_discriminator(self, discriminator: Discriminator | None) -> Schema:
        self.discriminator = discriminator
        return self

    def set_enum(self, values: Iterable[str]) -> Schema:
        """Append raw JSON values to the enum."""
        self.enum.extend(values)
        return self

    def set_multiple_of(self, value: int | None) -> Schema:
        if value is not None:
            self.multiple_of = str(int(value))
        return self

    def set_maximum(self, value: int | None) -> Schema:
        if value is not None:
            self.maximum = str(int(value))
        return self

    def set_exclusive_maximum(self, exclusive: bool) -> Schema:
        self.exclusive_maximum = exclusive
        return self

    def set_minimum(self, value: int | None) -> Schema:
        if value is not None:
            self.minimum = str(int(value))
        return self

    def set_exclusive_minimum(self, exclusive: bool) -> Schema:
        self.exclusive_minimum = exclusive
        return self

    def set_max_length(self, value: int | None) -> Schema:
        self.max_length = value
        return self

    def set_min_length(self, value: int | None) -> Schema:
        self.min_length = value
        return self

    def set_pattern(self, pattern: str) -> Schema:
        self.pattern = pattern
        return self

    def set_max_items(self, value: int | None) -> Schema:
        self.max_items = value
        return self

    def set_min_items(self, value: int | None) -> Schema:
        self.min_items = value
        return self

    def set_unique_items(self, unique: bool) -> Schema:
        self.unique_items = unique
        return self

    def set_max_properties(self, value: int | None) -> Schema:
        self.max_properties = value
        return self

    def set_min_properties(self, value: int | None) -> Schema:
        self.min_properties = value
        return self

    def set_default(self, default: str | None) -> Schema:
        self.default = default
        return self

    def set_deprecated(self, deprecated: bool) -> Schema:
        self.deprecated = deprecated
        return self

    def to_named(self, name: str) -> NamedSchema:
        return NamedSchema(self, name)

    def as_array(self) -> Schema:
        """Return a new array schema whose items are this schema."""
        return Schema(type="array", items=Items(item=self))

    def as_enum(self, default: str | None, *args: str) -> Schema:
        """Return a new enum schema of this schema's type."""
        return Schema(type=self.type, default=default, enum=list(args))

    def to_property(self, name: str) -> Property:
        return Property(name=name, schema=self)


@dataclass
class NamedSchema:
    """A schema together with the name it is registered under."""

    schema: Schema | None
    name: str

    def as_local_ref(self) -> Schema:
        """Return a schema referencing this one in the local document."""
        return Schema(ref="#/components/schemas/" + escape_ref(self.name))


def _primitive(type_: str, format_: str = "") -> Schema:
    return Schema(type=type_, format=format_)


def integer() -> Schema:
    return _primitive("integer")


def int32() -> Schema:
    return _primitive("integer", "int32")


def int64() -> Schema:
    return _primitive("integer", "int64")


def float_() -> Schema:
    return _primitive("number", "float")


def double() -> Schema:
    return _primitive("number", "double")


def string() -> Schema:
    return _primitive("string")


def uuid_() -> Schema:
    return _primitive("string", "uuid")


def bytes_() -> Schema:
    """A base64-encoded string."""
    return _primitive("string", "byte")


def binary() -> Schema:
    """A sequence of octets."""
    return _primitive("string", "binary")


def boolean() -> Schema:
    return _primitive("boolean")


def date() -> Schema:
    return _primitive("string", "date")


def date_time() -> Schema:
    return _primitive("string", "date-time")


def password() -> Schema:
    return _primitive("string", "password")