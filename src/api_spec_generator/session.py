"""Generation session state.

A session moves ``input -> analyzing -> result``; a failed analysis moves it
from ``analyzing`` back to ``input`` carrying the error message. Sessions
are immutable, each transition returns a new one.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict

from api_spec_generator.config import DEFAULT_PROVIDER
from api_spec_generator.errors import InvalidTransition

Step = Literal["input", "analyzing", "result"]


class GenerationSession(BaseModel):
    model_config = ConfigDict(frozen=True)

    step: Step = "input"
    source: str | None = None
    provider: str = DEFAULT_PROVIDER
    template: str = "basic"
    specification: str = ""
    error: str = ""

    def start(self, source: str, provider: str, template: str) -> "GenerationSession":
        self._require("input", "start")
        return self.model_copy(
            update={"step": "analyzing", "source": source, "provider": provider, "template": template, "error": ""}
        )

    def succeed(self, specification: str) -> "GenerationSession":
        self._require("analyzing", "succeed")
        return self.model_copy(update={"step": "result", "specification": specification})

    def fail(self, message: str) -> "GenerationSession":
        self._require("analyzing", "fail")
        return self.model_copy(update={"step": "input", "error": message})

    def reset(self) -> "GenerationSession":
        return GenerationSession()

    def _require(self, step: Step, action: str) -> None:
        if self.step != step:
            raise InvalidTransition(f"Cannot {action} a session in step '{self.step}'.")
