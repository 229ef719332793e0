"""Provider settings and fixed output constants."""

PROVIDERS = ("gemini", "openai")

DEFAULT_PROVIDER = "gemini"

# litellm model names
DEFAULT_MODELS = {
    "gemini": "gemini/gemini-1.5-flash",
    "openai": "gpt-4o-mini",
}

API_KEY_ENV_VARS = {
    "gemini": "GEMINI_API_KEY",
    "openai": "OPENAI_API_KEY",
}

DEFAULT_OUTPUT = "api-specification.md"

POSTMAN_BASE_URL = "https://api.example.com"
POSTMAN_SCHEMA = "https://schema.getpostman.com/json/collection/v2.1.0/collection.json"
OPENAPI_VERSION = "3.0.0"
DOC_VERSION = "1.0.0"


def default_model(provider: str) -> str:
    if provider not in DEFAULT_MODELS:
        raise ValueError(f"Unsupported provider: {provider}")
    return DEFAULT_MODELS[provider]
