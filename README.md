# ogen

Building blocks for a code generator that works from OpenAPI documents. The
package has no third-party dependencies.

- `ogen.spec` and `ogen.schema` are a fluent builder for OpenAPI documents.
  Every `set_*` and `add_*` method returns the object it was called on, so
  calls can be chained.
- `ogen.conv` turns strings from paths, queries, headers and cookies into
  typed values.
- `ogen.features` defines the generator's named features and the default set.
- `ogen.contents` parses media types. It also drops wildcard content types
  when a more specific type is present.
- `ogen.errors` defines the generator's error types. It also has helpers that
  ignore chosen "not implemented" failures and explain them to the user.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building a document

```python
from ogen.spec import Spec, Info, Operation, PathItem, Response
from ogen.schema import Schema, int64, string

pet = (
    Schema()
    .set_description("A pet")
    .add_required_properties(
        int64().to_property("id"),
        string().to_property("name"),
    )
)

spec = (
    Spec()
    .set_openapi("3.1.0")
    .set_info(Info().set_title("Pets").set_version("1.0.0"))
    .add_schema("Pet", pet)
)

ok = Response().set_description("Success").set_json_content(
    spec.ref_schema("Pet").schema  # a Schema whose ref is "#/components/schemas/Pet"
)
spec.add_path_item(
    "/pets/{id}",
    PathItem().set_get(Operation().set_operation_id("getPet").add_response("200", ok)),
)
```

`schema.py` has ready-made schemas for the common data types: `integer`,
`int32`, `int64`, `float_`, `double`, `string`, `uuid_`, `bytes_`, `binary`,
`boolean`, `date`, `date_time` and `password`. `Schema.as_array()` wraps a
schema in an array, and `Schema.as_enum(default, *values)` makes an enum
of the same type. Enum values, defaults and numeric bounds are stored as raw
JSON text.

Every `as_local_ref()` method returns a `$ref` object that points into the same
document. These methods are on `NamedSchema`, `NamedParameter`,
`NamedResponse`, `NamedRequestBody` and `NamedPathItem`. Names are escaped as
JSON Pointer requires (`~` becomes `~0`, `/` becomes `~1`), and `escape_ref`
does the same escaping on its own. `Spec.ref_schema`, `Spec.ref_response`
and `Spec.ref_request_body` return `None` when the name is not registered.

## Converting parameter values

```python
from ogen import conv

conv.to_int32("42")              # 42
conv.to_bool("true")             # True
conv.to_int32_array(["1", "2"])  # [1, 2]
conv.to_date("2024-01-31")       # datetime.date(2024, 1, 31)
conv.to_duration("1h30m")        # datetime.timedelta(seconds=5400)
```

Each converter raises `ValueError` when its input is malformed or out of
range for the type. Sized integers (`to_int8` through `to_uint64`) check
their bit width. `to_mac` returns the address as `bytes`. `to_addr` returns an
`ipaddress` address, and `to_url` returns a `urllib.parse.SplitResult`.
`date_part`, `time_part` and `date_time_part` cut a `datetime` down to its
date, its time of day, or whole seconds.

## Features

```python
from ogen.features import FeatureOptions, FeatureSet, OGEN_OTEL

enabled = FeatureOptions(disable={"ogen/otel"}).build()
enabled.has(OGEN_OTEL)                       # False
enabled.enable("client/request/validation")
FeatureSet.from_names(["paths/client"])
```

`build()` starts from `DEFAULT_FEATURES`, or from nothing if `disable_all`
is set. It then removes the disabled names and adds the enabled ones.
Enabling a name that is not in `ALL_FEATURES` raises `ValueError`.

## Content types

```python
from ogen.contents import filter_most_specific, parse_media_type

parse_media_type("text/plain; charset=utf-8")  # ("text/plain", {"charset": "utf-8"})

contents = {"application/*": "any", "application/json": "json"}
filter_most_specific(contents)  # {"application/*": "application/json"}
contents                        # {"application/json": "json"}
```

## Errors

`NotImplementedFeatureError` and `UnsupportedContentTypesError` mark parts of
a document the generator does not support. `ParseSpecError`,
`BuildRouterError` and `GoFormatError` wrap an underlying cause. All of these
derive from `GeneratorError`.

`filter_not_implemented(err, ignore, hook)` returns `None` when `err`, or an
error in its `__cause__` chain, is an unimplemented feature named in `ignore`.
The name `"all"` in `ignore` matches every such feature. Any other error is
returned unchanged. `not_implemented_message(err)` returns a message for the
user and the feature name, or `None` if `err` is not one of these errors.

## What this package does not do

There is no command-line tool. The package does not read or parse OpenAPI
documents from files, and it does not write generated source code. It gives
you the document model, converters, features, content-type handling and
errors that such a tool would be built on.