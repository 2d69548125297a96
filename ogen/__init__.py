"""Building blocks for OpenAPI code generation: document builder, converters, features, content types and errors."""

__version__ = "0.1.0"