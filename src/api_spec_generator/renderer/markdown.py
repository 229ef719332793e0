"""Markdown renderers: basic, detailed and custom templates.

All three share the header and the endpoint summary table. They differ in
what each endpoint section contains and whether sections are separated by
a horizontal rule.
"""

from api_spec_generator.models import AnalysisResult, CustomTemplate, Endpoint
from api_spec_generator.renderer.common import NO_DESCRIPTION, json_block, table_cell

RULE = "---\n\n"


def render_basic(result: AnalysisResult) -> str:
    parts = [_title(f"{result.project_name} API spec"), _overview(result, "Overview"), _summary_table(result)]
    parts.append("## Detailed spec\n\n")
    for endpoint in result.endpoints:
        parts.append(_heading(endpoint))
        parts.append(_description(endpoint, "Description"))
        parts.append(_request_body(endpoint, "Request body"))
        parts.append(_response_examples(endpoint))
    return "".join(parts)


def render_detailed(result: AnalysisResult) -> str:
    parts = [_title(f"{result.project_name} API spec"), _overview(result, "Overview"), _summary_table(result)]
    parts.append("## Authentication\nBearer token may be required.\n\n")
    parts.append("## Detailed spec\n\n")
    for endpoint in result.endpoints:
        parts.append(_heading(endpoint))
        parts.append(_description(endpoint, "Description"))
        parts.append(_parameters(endpoint, "Parameters", quoted=False))
        parts.append(_response_codes(endpoint, "Response codes", quoted=False))
        parts.append(_request_body(endpoint, "Request body"))
        parts.append(_response_examples(endpoint))
        parts.append(RULE)
    return "".join(parts)


def render_custom(result: AnalysisResult, template: CustomTemplate) -> str:
    parts = [_title(result.project_name), _overview(result, "Project description"), _summary_table(result)]
    if template.include_authentication:
        parts.append("## Authentication\nSome endpoints may require authentication.\n\n")

    parts.append("## API endpoints\n\n")
    for endpoint in result.endpoints:
        parts.append(_heading(endpoint))
        parts.append(_description(endpoint, "Summary"))
        parts.append(_parameters(endpoint, "Request parameters", quoted=True))
        if template.include_examples:
            parts.append(_request_body(endpoint, "Request example"))
        if template.include_error_codes:
            parts.append(_response_codes(endpoint, "Response status codes", quoted=True))
        if template.include_examples:
            parts.append(_response_examples(endpoint))
        parts.append(RULE)
    return "".join(parts)


# -- sections -----------------------------------------------------------------


def _title(text: str) -> str:
    return f"# {text}\n\n"


def _overview(result: AnalysisResult, heading: str) -> str:
    if not result.description:
        return ""
    return f"## {heading}\n{result.description}\n\n"


def _summary_table(result: AnalysisResult) -> str:
    lines = [
        "## Endpoint summary",
        "",
        "| API name | Method | Path | Description |",
        "|----------|--------|------|-------------|",
    ]
    for endpoint in result.endpoints:
        name = endpoint.description or f"`{endpoint.label}`"
        cells = [name, endpoint.method, endpoint.path, endpoint.description or ""]
        lines.append("| " + " | ".join(table_cell(c) for c in cells) + " |")
    return "\n".join(lines) + "\n\n"


def _heading(endpoint: Endpoint) -> str:
    return f"### {endpoint.label}\n\n"


def _description(endpoint: Endpoint, label: str) -> str:
    if not endpoint.description:
        return ""
    return f"**{label}**: {endpoint.description}\n\n"


def _parameters(endpoint: Endpoint, label: str, quoted: bool) -> str:
    if not endpoint.parameters:
        return ""
    lines = [f"**{label}**:"]
    for param in endpoint.parameters:
        name = f"`{param.name}`" if quoted else param.name
        lines.append(f"- {name} ({param.location}): {param.description or NO_DESCRIPTION}")
    return "\n".join(lines) + "\n\n"


def _response_codes(endpoint: Endpoint, label: str, quoted: bool) -> str:
    if not endpoint.responses:
        return ""
    lines = [f"**{label}**:"]
    for response in endpoint.responses:
        code = f"`{response.status_code}`" if quoted else str(response.status_code)
        lines.append(f"- {code}: {response.description or NO_DESCRIPTION}")
    return "\n".join(lines) + "\n\n"


def _request_body(endpoint: Endpoint, label: str) -> str:
    body = endpoint.request_body
    if body is None:
        return ""
    payload = body.example if body.example is not None else body.schema_
    return f"**{label}**:\n{json_block(payload)}\n"


def _response_examples(endpoint: Endpoint) -> str:
    parts = []
    for response in endpoint.responses or []:
        if response.example is None:
            continue
        parts.append(f"**Response example ({response.status_code})**:\n{json_block(response.example)}\n")
    return "".join(parts)
