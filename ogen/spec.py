"""Fluent builders for OpenAPI documents."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Iterable

from .schema import NamedSchema, Schema, escape_ref

_JSON = "application/json"


@dataclass
class Contact:
    """Contact information of the API."""

    name: str = ""
    url: str = ""
    email: str = ""

    def set_name(self, name: str) -> Contact:
        self.name = name
        return self

    def set_url(self, url: str) -> Contact:
        self.url = url
        return self

    def set_email(self, email: str) -> Contact:
        self.email = email
        return self


@dataclass
class License:
    """License information of the API."""

    name: str = ""
    url: str = ""

    def set_name(self, name: str) -> License:
        self.name = name
        return self

    def set_url(self, url: str) -> License:
        self.url = url
        return self


@dataclass
class Info:
    """Metadata about the API."""

    title: str = ""
    description: str = ""
    terms_of_service: str = ""
    contact: Contact | None = None
    license: License | None = None
    version: str = ""

    def set_title(self, title: str) -> Info:
        self.title = title
        return self

    def set_description(self, description: str) -> Info:
        self.description = description
        return self

    def set_terms_of_service(self, terms: str) -> Info:
        self.terms_of_service = terms
        return self

    def set_contact(self, contact: Contact | None) -> Info:
        self.contact = contact
        return self

    def set_license(self, license_: License | None) -> Info:
        self.license = license_
        return self

    def set_version(self, version: str) -> Info:
        self.version = version
        return self


@dataclass
class Server:
    """A server the API is reachable at."""

    description: str = ""
    url: str = ""
    variables: dict[str, Any] = field(default_factory=dict)

    def set_description(self, description: str) -> Server:
        self.description = description
        return self

    def set_url(self, url: str) -> Server:
        self.url = url
        return self


@dataclass
class Media:
    """Schema of one media type of a body."""

    schema: Schema | None = None


@dataclass
class Parameter:
    """An operation parameter."""

    ref: str = ""
    name: str = ""
    location: str = ""
    description: str = ""
    schema: Schema | None = None
    required: bool = False
    deprecated: bool = False
    content: dict[str, Media] = field(default_factory=dict)
    style: str = ""
    explode: bool | None = None

    def set_ref(self, ref: str) -> Parameter:
        self.ref = ref
        return self

    def set_name(self, name: str) -> Parameter:
        self.name = name
        return self

    def set_in(self, location: str) -> Parameter:
        self.location = location
        return self

    def in_path(self) -> Parameter:
        return self.set_in("path")

    def in_query(self) -> Parameter:
        return self.set_in("query")

    def in_header(self) -> Parameter:
        return self.set_in("header")

    def in_cookie(self) -> Parameter:
        return self.set_in("cookie")

    def set_description(self, description: str) -> Parameter:
        self.description = description
        return self

    def set_schema(self, schema: Schema | None) -> Parameter:
        if schema is not None:
            self.schema = schema
        return self

    def set_required(self, required: bool) -> Parameter:
        self.required = required
        return self

    def set_deprecated(self, deprecated: bool) -> Parameter:
        self.deprecated = deprecated
        return self

    def set_content(self, content: dict[str, Media] | None) -> Parameter:
        self.content = dict(content) if content is not None else {}
        return self

    def set_style(self, style: str) -> Parameter:
        self.style = style
        return self

    def set_explode(self, explode: bool) -> Parameter:
        self.explode = explode
        return self

    def to_named(self, name: str) -> NamedParameter:
        return NamedParameter(self, name)


@dataclass
class NamedParameter:
    """A parameter together with the name it is registered under."""

    parameter: Parameter | None
    name: str

    def as_local_ref(self) -> Parameter:
        return Parameter(ref="#/components/parameters/" + escape_ref(self.name))


@dataclass
class Response:
    """A response of an operation."""

    ref: str = ""
    description: str = ""
    headers: dict[str, Any] = field(default_factory=dict)
    content: dict[str, Media] = field(default_factory=dict)
    links: dict[str, Any] = field(default_factory=dict)

    def set_ref(self, ref: str) -> Response:
        self.ref = ref
        return self

    def set_description(self, description: str) -> Response:
        self.description = description
        return self

    def set_headers(self, headers: dict[str, Any] | None) -> Response:
        self.headers = dict(headers) if headers is not None else {}
        return self

    def set_content(self, content: dict[str, Media] | None) -> Response:
        self.content = dict(content) if content is not None else {}
        return self

    def add_content(self, media_type: str, schema: Schema | None) -> Response:
        """Add ``schema`` under ``media_type``; a missing schema is ignored."""
        if schema is not None:
            self.content[media_type] = Media(schema)
        return self

    def set_json_content(self, schema: Schema | None) -> Response:
        return self.add_content(_JSON, schema)

    def set_links(self, links: dict[str, Any] | None) -> Response:
        self.links = dict(links) if links is not None else {}
        return self

    def to_named(self, name: str) -> NamedResponse:
        return NamedResponse(self, name)


@dataclass
class NamedResponse:
    """A response together with the name it is registered under."""

    response: Response | None
    name: str

    def as_local_ref(self) -> Response:
        return Response(ref="#/components/responses/" + escape_ref(self.name))


@dataclass
class RequestBody:
    """A request body of an operation."""

    ref: str = ""
    description: str = ""
    content: dict[str, Media] = field(default_factory=dict)
    required: bool = False

    def set_ref(self, ref: str) -> RequestBody:
        self.ref = ref
        return self

    def set_description(self, description: str) -> RequestBody:
        self.description = description
        return self

    def set_content(self, content: dict[str, Media] | None) -> RequestBody:
        self.content = dict(content) if content is not None else {}
        return self

    def add_content(self, media_type: str, schema: Schema | None) -> RequestBody:
        """Add ``schema`` under ``media_type``; a missing schema is ignored."""
        if schema is not None:
            self.content[media_type] = Media(schema)
        return self

    def set_json_content(self, schema: Schema | None) -> RequestBody:
        return self.add_content(_JSON, schema)

    def set_required(self, required: bool) -> RequestBody:
        self.required = required
        return self

    def to_named(self, name: str) -> NamedRequestBody:
        return NamedRequestBody(self, name)


@dataclass
class NamedRequestBody:
    """A request body together with the name it is registered under."""

    request_body: RequestBody | None
    name: str

    def as_local_ref(self) -> RequestBody:
        return RequestBody(ref="#/components/requestBodies/" + escape_ref(self.name))


@dataclass
class Operation:
    """A single API operation on a path."""

    tags: list[str] = field(default_factory=list)
    summary: str = ""
    description: str = ""
    operation_id: str = ""
    parameters: list[Parameter] = field(default_factory=list)
    request_body: RequestBody | None = None
    responses: dict[str, Response] = field(default_factory=dict)

    def set_tags(self, tags: Iterable[str] | None) -> Operation:
        self.tags = list(tags or ())
        return self

    def add_tags(self, *args: str) -> Operation:
        self.tags.extend(args)
        return self

    def set_summary(self, summary: str) -> Operation:
        self.summary = summary
        return self

    def set_description(self, description: str) -> Operation:
        self.description = description
        return self

    def set_operation_id(self, operation_id: str) -> Operation:
        self.operation_id = operation_id
        return self

    def set_parameters(self, parameters: Iterable[Parameter] | None) -> Operation:
        self.parameters = list(parameters or ())
        return self

    def add_parameters(self, *args: Parameter) -> Operation:
        self.parameters.extend(args)
        return self

    def set_request_body(self, body: RequestBody | None) -> Operation:
        self.request_body = body
        return self

    def set_responses(self, responses: dict[str, Response] | None) -> Operation:
        self.responses = dict(responses) if responses is not None else {}
        return self

    def add_response(self, name: str, response: Response | None) -> Operation:
        self.responses[name] = response
        return self

    def add_named_responses(self, *args: NamedResponse) -> Operation:
        for named in args:
            self.add_response(named.name, named.response)
        return self


@dataclass
class PathItem:
    """The operations available on a single path."""

    ref: str = ""
    description: str = ""
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None
    servers: list[Server] = field(default_factory=list)
    parameters: list[Parameter] = field(default_factory=list)

    def set_ref(self, ref: str) -> PathItem:
        self.ref = ref
        return self

    def set_description(self, description: str) -> PathItem:
        self.description = description
        return self

    def set_get(self, operation: Operation | None) -> PathItem:
        self.get = operation
        return self

    def set_put(self, operation: Operation | None) -> PathItem:
        self.put = operation
        return self

    def set_post(self, operation: Operation | None) -> PathItem:
        self.post = operation
        return self

    def set_delete(self, operation: Operation | None) -> PathItem:
        self.delete = operation
        return self

    def set_options(self, operation: Operation | None) -> PathItem:
        self.options = operation
        return self

    def set_head(self, operation: Operation | None) -> PathItem:
        self.head = operation
        return self

    def set_patch(self, operation: Operation | None) -> PathItem:
        self.patch = operation
        return self

    def set_trace(self, operation: Operation | None) -> PathItem:
        self.trace = operation
        return self

    def set_servers(self, servers: Iterable[Server] | None) -> PathItem:
        self.servers = list(servers or ())
        return self

    def add_servers(self, *args: Server | None) -> PathItem:
        self.servers.extend(dataclasses.replace(s) for s in args if s is not None)
        return self

    def set_parameters(self, parameters: Iterable[Parameter] | None) -> PathItem:
        self.parameters = list(parameters or ())
        return self

    def add_parameters(self, *args: Parameter) -> PathItem:
        self.parameters.extend(args)
        return self

    def to_named(self, name: str) -> NamedPathItem:
        return NamedPathItem(self, name)


@dataclass
class NamedPathItem:
    """A path item together with its path."""

    path_item: PathItem | None
    name: str

    def as_local_ref(self) -> PathItem:
        return PathItem(ref="#/paths/" + escape_ref(self.name))


@dataclass
class Components:
    """Reusable objects of a document."""

    schemas: dict[str, Schema] = field(default_factory=dict)
    responses: dict[str, Response] = field(default_factory=dict)
    parameters: dict[str, Parameter] = field(default_factory=dict)
    request_bodies: dict[str, RequestBody] = field(default_factory=dict)


@dataclass
class Spec:
    """An OpenAPI document."""

    openapi: str = ""
    info: Info = field(default_factory=Info)
    servers: list[Server] = field(default_factory=list)
    paths: dict[str, PathItem] = field(default_factory=dict)
    components: Components | None = None

    def set_openapi(self, version: str) -> Spec:
        self.openapi = version
        return self

    def set_info(self, info: Info | None) -> Spec:
        if info is not None:
            self.info = dataclasses.replace(info)
        return self

    def set_servers(self, servers: Iterable[Server] | None) -> Spec:
        self.servers = list(servers or ())
        return self

    def add_servers(self, *args: Server | None) -> Spec:
        self.servers.extend(dataclasses.replace(s) for s in args if s is not None)
        return self

    def set_paths(self, paths: dict[str, PathItem] | None) -> Spec:
        self.paths = dict(paths) if paths is not None else {}
        return self

    def add_path_item(self, name: str, item: PathItem | None) -> Spec:
        self.paths[name] = item
        return self

    def add_named_path_items(self, *args: NamedPathItem) -> Spec:
        for named in args:
            self.add_path_item(named.name, named.path_item)
        return self

    def set_components(self, components: Components | None) -> Spec:
        self.components = components
        return self

    def _components(self) -> Components:
        if self.components is None:
            self.components = Components()
        return self.components

    def add_schema(self, name: str, schema: Schema | None) -> Spec:
        self._components().schemas[name] = schema
        return self

    def add_named_schemas(self, *args: NamedSchema) -> Spec:
        for named in args:
            self.add_schema(named.name, named.schema)
        return self

    def add_response(self, name: str, response: Response | None) -> Spec:
        self._components().responses[name] = response
        return self

    def add_named_responses(self, *args: NamedResponse) -> Spec:
        for named in args:
            self.add_response(named.name, named.response)
        return self

    def add_parameter(self, name: str, parameter: Parameter | None) -> Spec:
        self._components().parameters[name] = parameter
        return self

    def add_named_parameters(self, *args: NamedParameter) -> Spec:
        for named in args:
            self.add_parameter(named.name, named.parameter)
        return self

    def add_request_body(self, name: str, body: RequestBody | None) -> Spec:
        self._components().request_bodies[name] = body
        return self

    def add_named_request_bodies(self, *args: NamedRequestBody) -> Spec:
        for named in args:
            self.add_request_body(named.name, named.request_body)
        return self

    def ref_schema(self, name: str) -> NamedSchema | None:
        """Return a reference to a registered schema, or None if absent."""
        if self.components is None or name not in self.components.schemas:
            return None
        return NamedSchema(self.components.schemas[name], name).as_local_ref().to_named(name)

    def ref_response(self, name: str) -> NamedResponse | None:
        """Return a reference to a registered response, or None if absent."""
        if self.components is None or name not in self.components.responses:
            return None
        return NamedResponse(self.components.responses[name], name).as_local_ref().to_named(name)

    def ref_request_body(self, name: str) -> NamedRequestBody | None:
        """Return a reference to a registered request body, or None if absent."""
        if self.components is None or name not in self.components.request_bodies:
            return None
        body = self.components.request_bodies[name]
        return NamedRequestBody(body, name).as_local_ref().to_named(name)