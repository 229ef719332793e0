"""OpenAPI 3.0 renderer.

The document is emitted as JSON inside a fence labelled ``yaml``; existing
consumers of the generated files rely on that label.
"""

from api_spec_generator.config import DOC_VERSION, OPENAPI_VERSION
from api_spec_generator.models import AnalysisResult, Endpoint, Parameter, Response
from api_spec_generator.renderer.common import fenced, pretty_json


def build_openapi(result: AnalysisResult) -> dict:
    """Build an OpenAPI-shaped dict, one operation per (path, method)."""
    paths: dict[str, dict] = {}
    for endpoint in result.endpoints:
        paths.setdefault(endpoint.path, {})[endpoint.method.lower()] = _operation(endpoint)

    return {
        "openapi": OPENAPI_VERSION,
        "info": {
            "title": result.project_name,
            "description": result.description,
            "version": DOC_VERSION,
        },
        "paths": paths,
    }


def render_swagger(result: AnalysisResult) -> str:
    return fenced(pretty_json(build_openapi(result)), "yaml")


def _operation(endpoint: Endpoint) -> dict:
    operation: dict = {}
    if endpoint.description is not None:
        operation["summary"] = endpoint.description
    if endpoint.parameters is not None:
        operation["parameters"] = [_parameter(p) for p in endpoint.parameters]
    if endpoint.responses is not None:
        operation["responses"] = {str(r.status_code): _response(r) for r in endpoint.responses}
    return operation


def _parameter(param: Parameter) -> dict:
    data = {
        "name": param.name,
        "in": param.location,
        "required": param.required,
        "schema": {"type": param.data_type},
    }
    if param.description is not None:
        data["description"] = param.description
    return data


def _response(response: Response) -> dict:
    data: dict = {"description": response.description}
    if response.example is not None:
        data["content"] = {"application/json": {"example": response.example}}
    return data
