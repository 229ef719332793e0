import json
from pathlib import Path

from api_spec_generator.models import AnalysisResult, CustomTemplate, Endpoint, RequestBody
from api_spec_generator.renderer.markdown import render_basic, render_custom, render_detailed

FIXTURES = Path(__file__).parent / "fixtures"


def _load_fixture() -> AnalysisResult:
    data = json.loads((FIXTURES / "analysis.json").read_text(encoding="utf-8"))
    return AnalysisResult.model_validate(data)


def _scenario() -> AnalysisResult:
    return AnalysisResult.model_validate({
        "projectName": "demo",
        "description": "",
        "endpoints": [{
            "method": "GET",
            "path": "/api/users/{id}",
            "description": "Get a user",
            "parameters": [{"name": "id", "type": "path", "dataType": "integer", "required": True}],
            "responses": [{"statusCode": 200, "description": "OK", "example": {"id": 1}}],
        }],
    })


def _table_rows(markdown: str) -> list[str]:
    lines = markdown.split("## Endpoint summary\n\n", 1)[1].split("\n\n", 1)[0].splitlines()
    return lines[2:]


class TestBasicTemplate:
    def test_scenario(self):
        output = render_basic(_scenario())
        assert "### GET /api/users/{id}" in output
        assert '```json\n{\n  "id": 1\n}\n```' in output

    def test_title_and_overview(self):
        output = render_basic(_load_fixture())
        assert output.startswith("# user-service API spec\n\n## Overview\nSpring Boot user management API\n")

    def test_overview_omitted_without_description(self):
        assert "## Overview" not in render_basic(_scenario())

    def test_summary_table_rows_in_order(self):
        rows = _table_rows(render_basic(_load_fixture()))
        assert rows == [
            "| List users | GET | /api/users | List users |",
            "| Create a user | POST | /api/users | Create a user |",
            "| `DELETE /api/users/{id}` | DELETE | /api/users/{id} |  |",
        ]

    def test_sections_in_endpoint_order(self):
        output = render_basic(_load_fixture())
        positions = [
            output.index("### GET /api/users\n"),
            output.index("### POST /api/users\n"),
            output.index("### DELETE /api/users/{id}\n"),
        ]
        assert positions == sorted(positions)

    def test_request_body_prefers_example(self):
        output = render_basic(_load_fixture())
        assert '"name": "Jane Doe"' in output
        assert '"properties"' not in output

    def test_request_body_falls_back_to_schema(self):
        result = AnalysisResult(
            project_name="x",
            endpoints=[Endpoint(
                method="POST", path="/a",
                request_body=RequestBody(schema_={"type": "object"}),
            )],
        )
        assert '{\n  "type": "object"\n}' in render_basic(result)

    def test_response_examples_labelled_with_status(self):
        output = render_basic(_load_fixture())
        assert "**Response example (201)**:" in output
        assert "**Response example (400)**" not in output

    def test_no_horizontal_rules(self):
        assert "\n---\n" not in render_basic(_load_fixture())

    def test_endpoint_without_optional_fields(self):
        result = AnalysisResult(project_name="x", endpoints=[Endpoint(method="GET", path="/health")])
        output = render_basic(result)
        assert "### GET /health\n\n" in output
        assert "```" not in output

    def test_pipe_in_description_is_escaped(self):
        result = AnalysisResult(
            project_name="x",
            endpoints=[Endpoint(method="GET", path="/a", description="read | write")],
        )
        rows = _table_rows(render_basic(result))
        assert rows == ["| read \\| write | GET | /a | read \\| write |"]

    def test_non_ascii_kept(self):
        result = AnalysisResult.model_validate({
            "projectName": "x",
            "endpoints": [{"method": "GET", "path": "/a", "responses": [
                {"statusCode": 200, "description": "성공", "example": {"name": "홍길동"}},
            ]}],
        })
        assert '"name": "홍길동"' in render_basic(result)


class TestDetailedTemplate:
    def test_authentication_note_after_table(self):
        output = render_detailed(_load_fixture())
        assert "## Authentication\nBearer token may be required.\n" in output
        assert output.index("## Endpoint summary") < output.index("## Authentication")

    def test_parameters_and_response_codes(self):
        output = render_detailed(_load_fixture())
        assert "- page (query): Page number" in output
        assert "- id (path): no description" in output
        assert "- 201: Created" in output
        assert "- 400: no description" in output

    def test_lists_come_before_examples(self):
        output = render_detailed(_load_fixture())
        post = output[output.index("### POST /api/users"):]
        assert post.index("**Response codes**") < post.index("**Request body**")
        assert post.index("**Request body**") < post.index("**Response example (201)**")

    def test_rule_after_every_endpoint(self):
        assert render_detailed(_load_fixture()).count("\n---\n") == 3

    def test_table_row_count(self):
        assert len(_table_rows(render_detailed(_load_fixture()))) == 3


class TestCustomTemplate:
    def test_all_sections_enabled(self):
        template = CustomTemplate(
            name="t", include_examples=True, include_error_codes=True, include_authentication=True,
        )
        output = render_custom(_load_fixture(), template)
        assert output.startswith("# user-service\n\n## Project description\nSpring Boot user management API\n")
        assert "## Authentication\n" in output
        assert "- `page` (query): Page number" in output
        assert "**Request example**:" in output
        assert "- `201`: Created" in output
        assert "**Response example (201)**:" in output
        assert output.count("\n---\n") == 3

    def test_all_sections_disabled(self):
        output = render_custom(_load_fixture(), CustomTemplate())
        assert "## Authentication" not in output
        assert "**Request example**" not in output
        assert "**Response status codes**" not in output
        assert "**Response example" not in output
        assert "- `id` (path): no description" in output

    def test_error_codes_without_examples(self):
        output = render_custom(_load_fixture(), CustomTemplate(include_error_codes=True))
        assert "- `204`: Deleted" in output
        assert "```" not in output

    def test_table_row_count(self):
        assert len(_table_rows(render_custom(_load_fixture(), CustomTemplate()))) == 3
