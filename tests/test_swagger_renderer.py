import json
from pathlib import Path

from api_spec_generator.models import AnalysisResult, Endpoint
from api_spec_generator.renderer.swagger import build_openapi, render_swagger

FIXTURES = Path(__file__).parent / "fixtures"


def _load_fixture() -> AnalysisResult:
    data = json.loads((FIXTURES / "analysis.json").read_text(encoding="utf-8"))
    return AnalysisResult.model_validate(data)


def _unfence(output: str, language: str) -> dict:
    prefix = f"```{language}\n"
    assert output.startswith(prefix)
    assert output.endswith("\n```")
    return json.loads(output[len(prefix):-len("\n```")])


class TestBuildOpenapi:
    def test_info(self):
        doc = build_openapi(_load_fixture())
        assert doc["openapi"] == "3.0.0"
        assert doc["info"] == {
            "title": "user-service",
            "description": "Spring Boot user management API",
            "version": "1.0.0",
        }

    def test_one_key_per_path_and_method(self):
        doc = build_openapi(_load_fixture())
        assert list(doc["paths"]) == ["/api/users", "/api/users/{id}"]
        assert set(doc["paths"]["/api/users"]) == {"get", "post"}
        assert set(doc["paths"]["/api/users/{id}"]) == {"delete"}

    def test_parameters_map_to_openapi_fields(self):
        get = build_openapi(_load_fixture())["paths"]["/api/users"]["get"]
        assert get["summary"] == "List users"
        assert get["parameters"] == [{
            "name": "page",
            "in": "query",
            "required": False,
            "schema": {"type": "integer"},
            "description": "Page number",
        }]

    def test_response_content_only_with_example(self):
        post = build_openapi(_load_fixture())["paths"]["/api/users"]["post"]
        assert post["responses"]["201"]["content"]["application/json"]["example"] == {"id": 2, "name": "Jane Doe"}
        assert post["responses"]["400"] == {"description": ""}

    def test_absent_fields_are_omitted(self):
        result = AnalysisResult(project_name="x", endpoints=[Endpoint(method="GET", path="/health")])
        assert build_openapi(result)["paths"] == {"/health": {"get": {}}}

    def test_method_is_lowercased(self):
        result = AnalysisResult(project_name="x", endpoints=[Endpoint(method="PATCH", path="/a")])
        assert "patch" in build_openapi(result)["paths"]["/a"]


class TestRenderSwagger:
    def test_json_in_yaml_fence(self):
        result = _load_fixture()
        assert _unfence(render_swagger(result), "yaml") == build_openapi(result)

    def test_two_space_indent(self):
        assert '\n  "openapi": "3.0.0",' in render_swagger(_load_fixture())
