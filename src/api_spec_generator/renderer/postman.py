"""Postman Collection v2.1 renderer."""

from api_spec_generator.config import POSTMAN_BASE_URL, POSTMAN_SCHEMA
from api_spec_generator.models import AnalysisResult, Endpoint, Response
from api_spec_generator.renderer.common import fenced, pretty_json

BASE_URL_VAR = "{{baseUrl}}"


def build_collection(result: AnalysisResult) -> dict:
    """Build a Postman collection dict with one item per endpoint."""
    return {
        "info": {
            "name": f"{result.project_name} API Collection",
            "description": result.description,
            "schema": POSTMAN_SCHEMA,
        },
        "item": [_item(endpoint) for endpoint in result.endpoints],
        "variable": [
            {"key": "baseUrl", "value": POSTMAN_BASE_URL, "type": "string"},
        ],
    }


def render_postman(result: AnalysisResult) -> str:
    return fenced(pretty_json(build_collection(result)), "json")


def _url(path: str) -> dict:
    return {
        "raw": f"{BASE_URL_VAR}{path}",
        "host": [BASE_URL_VAR],
        "path": [segment for segment in path.split("/") if segment],
    }


def _item(endpoint: Endpoint) -> dict:
    request: dict = {
        "method": endpoint.method,
        "header": [],
        "url": _url(endpoint.path),
    }
    if endpoint.request_body is not None:
        example = endpoint.request_body.example
        request["body"] = {
            "mode": "raw",
            "raw": pretty_json(example) if example is not None else "",
            "options": {"raw": {"language": "json"}},
        }

    return {
        "name": endpoint.description or endpoint.label,
        "request": request,
        "response": [_response(endpoint, r) for r in endpoint.responses or []],
    }


def _response(endpoint: Endpoint, response: Response) -> dict:
    return {
        "name": response.description,
        "originalRequest": {
            "method": endpoint.method,
            "header": [],
            "url": _url(endpoint.path),
        },
        "status": response.description,
        "code": response.status_code,
        "_postman_previewlanguage": "json",
        "header": [],
        "cookie": [],
        "body": pretty_json(response.example) if response.example is not None else "",
    }
