"""Template selection: the template catalogue, custom template loading and
the ``render`` entry point."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from api_spec_generator.errors import CustomTemplateError
from api_spec_generator.models import AnalysisResult, CustomTemplate, TemplateKind, TemplateOption
from api_spec_generator.renderer.markdown import render_basic, render_custom, render_detailed
from api_spec_generator.renderer.postman import render_postman
from api_spec_generator.renderer.swagger import render_swagger

logger = logging.getLogger(__name__)

TEMPLATE_OPTIONS = [
    TemplateOption(
        id="basic",
        name="Basic",
        description="Short, clear API document",
        preview="# API spec\n\n## Endpoint summary\n...\n### GET /api/users\n**Description**: List users",
    ),
    TemplateOption(
        id="detailed",
        name="Detailed",
        description="Parameters, response codes and examples",
        preview=(
            "# API spec\n\n## Authentication\nBearer token may be required.\n\n"
            "### GET /api/users\n**Parameters**:\n- page (query): page number\n"
            "**Response codes**:\n- 200: OK\n- 401: Unauthorized"
        ),
    ),
    TemplateOption(
        id="swagger",
        name="Swagger",
        description="OpenAPI 3.0 document",
        preview=(
            "openapi: 3.0.0\ninfo:\n  title: API\n  version: 1.0.0\npaths:\n"
            "  /api/users:\n    get:\n      summary: List users"
        ),
    ),
    TemplateOption(
        id="postman",
        name="Postman",
        description="Postman collection",
        preview=(
            '{\n  "info": {\n    "name": "API Collection"\n  },\n  "item": [\n    {\n'
            '      "name": "Get Users",\n      "request": {\n        "method": "GET",\n'
            '        "url": "/api/users"\n      }\n    }\n  ]\n}'
        ),
    ),
    TemplateOption(
        id="custom",
        name="Custom",
        description="Sections chosen in a custom template file",
        preview="A format defined by your own template file",
    ),
]

_RENDERERS = {
    "basic": render_basic,
    "detailed": render_detailed,
    "swagger": render_swagger,
    "postman": render_postman,
}


def render(result: AnalysisResult, kind: TemplateKind | str, custom: CustomTemplate | None = None) -> str:
    """Render an analysis result with the given template.

    Unknown template kinds, and ``custom`` without a template, fall back
    to the basic rendering.
    """
    if kind == "custom":
        if custom is None:
            logger.debug("No custom template given, rendering basic")
            return render_basic(result)
        return render_custom(result, custom)

    renderer = _RENDERERS.get(kind)
    if renderer is None:
        logger.warning("Unknown template %r, rendering basic", kind)
        renderer = render_basic
    return renderer(result)


def load_custom_template(path: Path) -> CustomTemplate:
    """Load a custom template from a YAML (or JSON) file."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        raise CustomTemplateError(f"Could not read custom template {path.name}: {e}") from e

    if not isinstance(data, dict):
        raise CustomTemplateError(f"Custom template {path.name} must be a mapping.")
    try:
        return CustomTemplate.model_validate(data)
    except ValidationError as e:
        raise CustomTemplateError(f"Invalid custom template {path.name}: {e}") from e
