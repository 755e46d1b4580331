"""
Query engines: interchangeable strategies that turn an error description
into a platform query.

    PatternQueryEngine   - keyword matching, no network
    OpenAIQueryEngine    - OpenAI chat completions (optionally via AI Gateway)
    AnthropicQueryEngine - Anthropic messages API

Usage:
    from config import load_settings
    from core.query_builder.engines import build_query_engine

    engine = build_query_engine(load_settings())
    query = engine.generate_query("500 errors from the API", Platform.SENTRY)
"""

import logging
from typing import Optional, Protocol

from core.prompts.platforms import build_system_prompt

from .generators import generate_query_from_features
from .models import Platform
from .patterns import extract_features

logger = logging.getLogger(__name__)

GATEWAY_URL_TEMPLATE = "https://gateway.ai.cloudflare.com/v1/{account_id}/{gateway_id}/openai"


class QueryGenerationError(Exception):
    """Raised by an engine that could not produce a query"""


class QueryEngine(Protocol):
    """Anything that can produce a query string from input and platform."""

    name: str

    def generate_query(self, text: str, platform: Platform) -> str:
        ...


def clean_llm_output(content: Optional[str], platform: Platform) -> str:
    """
    Trim model output and, for Elasticsearch, strip markdown code fences.

    Raises:
        QueryGenerationError: if nothing usable is left
    """
    query = (content or "").strip()

    if query and platform == Platform.ELASTICSEARCH:
        query = query.replace("```json", "").replace("```", "").strip()

    if not query:
        raise QueryGenerationError("Failed to generate query")
    return query


class PatternQueryEngine:
    """Deterministic fallback built on keyword extraction."""

    name = "pattern"

    def generate_query(self, text: str, platform: Platform) -> str:
        features = extract_features(text)
        return generate_query_from_features(features, platform)


class OpenAIQueryEngine:
    """Generates queries with OpenAI chat completions."""

    name = "openai"

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        temperature: float = 0.3,
        max_tokens: int = 500,
        base_url: Optional[str] = None,
        timeout: float = 30,
        client=None,
    ):
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.base_url = base_url

        if client is None:
            from openai import OpenAI
            client = OpenAI(api_key=api_key, base_url=base_url, timeout=timeout)
        self.client = client

    def generate_query(self, text: str, platform: Platform) -> str:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": build_system_prompt(platform)},
                {"role": "user", "content": text},
            ],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

        content = None
        if response.choices:
            content = response.choices[0].message.content
        return clean_llm_output(content, platform)


class AnthropicQueryEngine:
    """Generates queries with Anthropic's Claude models."""

    name = "anthropic"

    def __init__(
        self,
        api_key: str,
        model: str = "claude-3-5-haiku-20241022",
        temperature: float = 0.3,
        max_tokens: int = 500,
        timeout: float = 30,
        client=None,
    ):
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

        if client is None:
            from anthropic import Anthropic
            client = Anthropic(api_key=api_key, timeout=timeout)
        self.client = client

    def generate_query(self, text: str, platform: Platform) -> str:
        response = self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            system=build_system_prompt(platform),
            messages=[{"role": "user", "content": text}],
            temperature=self.temperature,
        )

        content = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
        return clean_llm_output(content, platform)


def gateway_base_url(account_id: str, gateway_id: str) -> Optional[str]:
    """Cloudflare AI Gateway endpoint, or None when not configured."""
    if account_id and gateway_id:
        return GATEWAY_URL_TEMPLATE.format(account_id=account_id, gateway_id=gateway_id)
    return None


def build_query_engine(settings) -> QueryEngine:
    """
    Select the engine named by `settings.llm_provider`.

    "auto" prefers OpenAI, then Anthropic, then the pattern engine.

    Raises:
        ValueError: explicit provider without its API key, or unknown provider
    """
    provider = settings.llm_provider

    if provider == "auto":
        if settings.openai_api_key:
            provider = "openai"
        elif settings.anthropic_api_key:
            provider = "anthropic"
        else:
            logger.warning("No LLM API key configured, using pattern-based query generation")
            provider = "pattern"

    if provider == "pattern":
        return PatternQueryEngine()

    if provider == "openai":
        if not settings.openai_api_key:
            raise ValueError("LLM_PROVIDER=openai requires OPENAI_API_KEY")
        base_url = gateway_base_url(settings.ai_gateway_account_id, settings.ai_gateway_id)
        if base_url:
            logger.info(f"Routing OpenAI requests through AI Gateway {settings.ai_gateway_id}")
        return OpenAIQueryEngine(
            api_key=settings.openai_api_key,
            model=settings.primary_llm,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
            base_url=base_url,
            timeout=settings.request_timeout,
        )

    if provider == "anthropic":
        if not settings.anthropic_api_key:
            raise ValueError("LLM_PROVIDER=anthropic requires ANTHROPIC_API_KEY")
        return AnthropicQueryEngine(
            api_key=settings.anthropic_api_key,
            model=settings.anthropic_model,
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
            timeout=settings.request_timeout,
        )

    raise ValueError(f"Unknown LLM provider: {provider}")
