"""Data models for analysis results and documentation templates.

The analyzer produces an AnalysisResult from the AI response and every
renderer consumes it. Fields are snake_case in Python and camelCase on the
wire; both spellings are accepted when building a model.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TemplateKind = Literal["basic", "detailed", "swagger", "postman", "custom"]

TEMPLATE_KINDS: tuple[str, ...] = ("basic", "detailed", "swagger", "postman", "custom")


class _Model(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class Parameter(_Model):
    """A single endpoint parameter."""

    name: str
    location: Literal["path", "query", "header"] = Field(alias="type")
    data_type: str = "string"
    required: bool = False
    description: str | None = None


class RequestBody(_Model):
    content_type: str = "application/json"
    schema_: Any = Field(default_factory=dict, alias="schema")
    example: Any = None


class Response(_Model):
    status_code: int
    description: str = ""
    schema_: Any = Field(default=None, alias="schema")
    example: Any = None


class Endpoint(_Model):
    """One documented HTTP operation."""

    method: str  # opaque, not validated against a verb list
    path: str  # /api/users/{id}
    description: str | None = None
    parameters: list[Parameter] | None = None
    request_body: RequestBody | None = None
    responses: list[Response] | None = None

    @property
    def label(self) -> str:
        return f"{self.method} {self.path}"


class AnalysisResult(_Model):
    """Structured outcome of analyzing a codebase's endpoints."""

    project_name: str
    description: str = ""
    endpoints: list[Endpoint] = []
    models: list[Any] = []  # carried through, no renderer reads it

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)


class CustomTemplate(_Model):
    """User-defined template options.

    ``format`` and ``sections`` are kept for AI-assisted rendering and are
    not read by the custom renderer.
    """

    name: str = ""
    format: str = ""
    sections: list[str] = []
    include_examples: bool = False
    include_error_codes: bool = False
    include_authentication: bool = False


class TemplateOption(_Model):
    id: str
    name: str
    description: str
    preview: str
