"""Pull the analysis JSON object out of free-form AI output.

Models often wrap the payload in a preamble, a closing remark or a
Markdown fence. The span from the first '{' to the last '}' is tried
first. When that span does not parse, the first '{' at which a complete
object decodes is used instead, so anything the greedy span accepts is
still accepted.
"""

import json

from pydantic import ValidationError

from api_spec_generator.errors import InvalidAnalysisJSON, MalformedAIResponse
from api_spec_generator.models import AnalysisResult

MAX_DECODE_ATTEMPTS = 200


def extract_json(text: str) -> AnalysisResult:
    """Parse the AnalysisResult embedded in an AI response."""
    data = _load_object(text)
    try:
        return AnalysisResult.model_validate(data)
    except ValidationError as e:
        raise InvalidAnalysisJSON(
            f"AI response JSON does not describe an analysis result ({e.error_count()} errors)."
        ) from e


def _load_object(text: str) -> dict:
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        raise MalformedAIResponse()

    try:
        return json.loads(text[start : end + 1])
    except RecursionError as e:
        raise InvalidAnalysisJSON("AI response JSON is nested too deeply to parse.") from e
    except json.JSONDecodeError as e:
        data = _first_decodable_object(text, start)
        if data is None:
            raise InvalidAnalysisJSON(f"AI response JSON could not be parsed: {e.msg} (char {e.pos}).") from e
        return data


def _first_decodable_object(text: str, start: int) -> dict | None:
    # Each attempt decodes from a later '{', so the cost grows with
    # braces x length; give up after MAX_DECODE_ATTEMPTS starts.
    decoder = json.JSONDecoder()
    index = start
    for _attempt in range(MAX_DECODE_ATTEMPTS):
        if index == -1:
            break
        try:
            data, _ = decoder.raw_decode(text, index)
            return data
        except RecursionError as e:
            raise InvalidAnalysisJSON("AI response JSON is nested too deeply to parse.") from e
        except json.JSONDecodeError:
            index = text.find("{", index + 1)
    return None
