"""Analysis pipeline: controller sources -> AI call -> AnalysisResult."""

import logging
from collections.abc import Callable
from pathlib import Path

from api_spec_generator.analyzer.extract import extract_json
from api_spec_generator.analyzer.prompt import SYSTEM_PROMPT, build_user_prompt
from api_spec_generator.analyzer.sources import collect_sources
from api_spec_generator.config import DEFAULT_PROVIDER
from api_spec_generator.errors import NoSourcesFound
from api_spec_generator.llm import LlmClient
from api_spec_generator.models import AnalysisResult

logger = logging.getLogger(__name__)

StepCallback = Callable[[str, str], None]


class ApiAnalyzer:
    """Turns a JAR/ZIP archive or source directory into an AnalysisResult."""

    def __init__(
        self,
        provider: str = DEFAULT_PROVIDER,
        api_key: str | None = None,
        model: str | None = None,
        on_step: StepCallback | None = None,
    ):
        self.client = LlmClient(provider=provider, api_key=api_key, model=model)
        self.on_step = on_step

    def analyze(self, source_path: Path) -> AnalysisResult:
        self._step("extract", f"Extracting controller files from {source_path.name}")
        sources = collect_sources(source_path)
        if not sources:
            raise NoSourcesFound(f"No controller source files found in {source_path.name}.")

        return self.analyze_sources(sources)

    def analyze_sources(self, sources: list[str]) -> AnalysisResult:
        """Run the AI analysis over already collected source texts."""
        self._step("analyze", f"Analyzing {len(sources)} controller files with {self.client.model}")
        response = self.client.call(system=SYSTEM_PROMPT, user=build_user_prompt(sources))

        self._step("parse", "Parsing the analysis result")
        result = extract_json(response)
        logger.info("Analysis of %s found %d endpoints", result.project_name, len(result.endpoints))
        return result

    def _step(self, step: str, message: str) -> None:
        logger.debug("%s: %s", step, message)
        if self.on_step:
            self.on_step(step, message)
