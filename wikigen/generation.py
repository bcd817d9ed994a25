# wikigen/generation.py
"""
Client for the chat-completion API that writes articles.

One call to `GenerationClient.generate` is one HTTP round-trip: the SDK's own
retries are switched off and the request is bounded by a timeout. Retrying is
the resolver's job. The raw reply is turned into a `GeneratedArticle` by
`parse_payload`, which never trusts the model's output until all three fields
are present.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional

from openai import APIError, OpenAI

from .errors import GenerationTransportError, MalformedGeneration

log = logging.getLogger(__name__)

REQUIRED_FIELDS = ("category", "title", "body")

_FENCED_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)```", re.I)


@dataclass(frozen=True)
class GeneratedArticle:
    category: str
    title: str
    body: str


def topic_from_slug(slug: str) -> str:
    return re.sub(r"\s+", " ", slug.replace("-", " ")).strip()


def build_prompt(topic: str, known_categories: Iterable[str]) -> str:
    categories = ", ".join(known_categories)
    return (
        "You are an expert writing about any topic, with that in mind, generate a static "
        f"webpage telling us in depth about '{topic}'.\n\n"
        "Instructions: generate JSON with the keys \"category\", \"title\" and \"body\". "
        "For the BODY, generate the COMPLETE HTML/CSS as one self-contained document and make it "
        "look beautiful with colors related to the category. "
        f"For the category, if the topic fits any of these existing categories: {categories}, "
        "use that category. If it doesn't fit any existing category, suggest a new appropriate "
        "category. Return ONLY the JSON object, DO NOT deliver anything ELSE!"
    )


def extract_payload(raw: str) -> str:
    m = _FENCED_BLOCK.search(raw)
    text = m.group(1).strip() if m else raw
    return text.replace("\n", " ")


def parse_payload(raw: str) -> GeneratedArticle:
    if not raw or not raw.strip():
        raise MalformedGeneration("empty response")
    try:
        data: Any = json.loads(extract_payload(raw))
    except (ValueError, RecursionError) as e:
        raise MalformedGeneration(f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise MalformedGeneration(f"expected a JSON object, got {type(data).__name__}")

    missing = [
        k for k in REQUIRED_FIELDS
        if not isinstance(data.get(k), str) or not data[k].strip()
    ]
    if missing:
        raise MalformedGeneration("missing or empty fields: " + ", ".join(missing))

    return GeneratedArticle(
        category=data["category"].strip(),
        title=data["title"].strip(),
        body=data["body"],
    )


class GenerationClient:
    def __init__(
        self,
        api_key: Optional[str],
        model: str,
        base_url: Optional[str] = None,
        temperature: float = 0.5,
        max_tokens: int = 4096,
        timeout: float = 60.0,
        client: Any = None,
    ):
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.client = client
        if self.client is None and api_key:
            self.client = OpenAI(api_key=api_key, base_url=base_url, timeout=timeout, max_retries=0)

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "GenerationClient":
        return cls(
            api_key=config.get("LLM_API_KEY"),
            model=config["LLM_MODEL"],
            base_url=config.get("LLM_BASE_URL"),
            temperature=config.get("LLM_TEMPERATURE", 0.5),
            max_tokens=config.get("LLM_MAX_TOKENS", 4096),
            timeout=config.get("LLM_TIMEOUT", 60.0),
        )

    def generate(self, topic: str, known_categories: Iterable[str]) -> str:
        if self.client is None:
            raise GenerationTransportError("no API key configured (OPENAI_API_KEY or GROQ_API_KEY)")

        log.debug("requesting article from %s: %r", self.model, topic)
        try:
            resp = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": build_prompt(topic, known_categories)}],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except APIError as e:
            log.warning("generation request failed: %s", e)
            raise GenerationTransportError(str(e)) from e

        if not resp.choices:
            raise GenerationTransportError("response contained no choices")
        content = resp.choices[0].message.content
        if content is None:
            raise GenerationTransportError("response message had no content")
        return content
