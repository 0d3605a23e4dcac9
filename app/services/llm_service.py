import json
import logging
import re
from typing import Any, Dict, List, Optional

from openai import OpenAI, OpenAIError

from app import config
from app.config import Settings
from app.errors import (
    ConfigurationError,
    ExternalServiceError,
    MalformedResponseError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# C0 controls plus DEL and the C1 range
CONTROL_CHARS = re.compile(r"[\u0000-\u001F\u007F-\u009F]")

SYSTEM_PROMPT = """You are a specialized document comparison expert that helps reviewers accurately detect and show the changes in a document. Your task is to analyze two versions of the same document and identify textual and semantic differences between them. Always answer in {language}. Follow these specific guidelines:

1. Analysis Focus:
   - Thoroughly highlight all textual changes (content)
   - Identify and note any structural modifications in the document layout
   - Highlight and explain semantic differences, including nuances in meaning
   - Consider the context and significance of changes, providing insights into their implications

2. Difference Categories:
   - Additions: Newly introduced content or text that was not present in the original document
   - Deletions: Content that has been removed or omitted from the original document
   - Modifications: Content that has been altered, rephrased, or restructured in any way

3. For each difference, provide:
   - The exact content that has changed, copied verbatim from the document
   - The precise location within the document where the change occurs
   - An analysis of how this change influences the overall meaning, context, and interpretation of the document

Format your response in JSON with this exact structure:
{{
  "differences": [
    {{
      "type": "addition" | "deletion" | "modification",
      "content": "the exact text that changed",
      "location": "precise location of the change within the document",
      "significance": "a concise explanation of how this change affects the meaning and interpretation of the document"
    }}
  ],
  "summary": "An overview of all significant changes made between the two documents, highlighting key additions, deletions, and modifications.",
  "impactAnalysis": "An analysis of how these changes influence the document's overall meaning, context, and objectives, including implications for the intended audience."
}}"""


def build_system_prompt(language: str) -> str:
    return SYSTEM_PROMPT.format(language=language)


def build_user_message(doc1: str, doc2: str) -> str:
    return (
        "Compare these two documents and analyze their differences:\n\n"
        f'First Document:\n"""\n{doc1}\n"""\n\n'
        f'Second Document:\n"""\n{doc2}\n"""\n\n'
        "Provide a detailed analysis of all meaningful differences."
    )


def clean_completion_text(content: str) -> str:
    """Drop control characters the model sometimes emits, then trim."""
    return CONTROL_CHARS.sub("", content).strip()


def parse_completion(content: Optional[str]) -> Dict[str, Any]:
    if not content:
        raise ExternalServiceError("No response content from OpenAI")

    cleaned = clean_completion_text(content)
    try:
        analysis = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        logger.error("JSON parse error: %s. Content: %r", exc, content)
        raise MalformedResponseError(
            "Failed to parse OpenAI response as JSON", details=str(exc)
        ) from exc

    if not isinstance(analysis, dict):
        logger.error("Completion is JSON but not an object. Content: %r", content)
        raise MalformedResponseError("Failed to parse OpenAI response as JSON")
    return analysis


class LLMService:
    """
    Wrapper around the OpenAI chat completions API for document comparison.
    The client is created lazily, so a missing key only fails the request
    that needs it.
    """

    def __init__(self, settings: Optional[Settings] = None, client: Optional[Any] = None):
        self.settings = settings or config.settings
        self._client = client

    def ensure_configured(self):
        if not self.settings.openai_api_key:
            raise ConfigurationError("OpenAI API key is not configured")

    def ensure_client(self):
        if self._client is not None:
            return self._client
        self.ensure_configured()
        logger.info("Creating OpenAI client for model %s", self.settings.model_id)
        self._client = OpenAI(api_key=self.settings.openai_api_key)
        return self._client

    def build_messages(self, doc1: str, doc2: str) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": build_system_prompt(self.settings.response_language)},
            {"role": "user", "content": build_user_message(doc1, doc2)},
        ]

    def compare_documents(self, doc1: Optional[str], doc2: Optional[str]) -> Dict[str, Any]:
        """
        Main comparison entrypoint. Returns the model's JSON object unchanged.
        One completion call per invocation; nothing is retried.
        """
        self.ensure_configured()
        if not doc1 or not doc2:
            raise ValidationError("Both documents are required")

        content = self._call_completion_api(self.build_messages(doc1, doc2))
        return parse_completion(content)

    def _call_completion_api(self, messages: List[Dict[str, str]]) -> Optional[str]:
        client = self.ensure_client()
        logger.info(
            "Requesting comparison from %s (%d chars)",
            self.settings.model_id,
            sum(len(m["content"]) for m in messages),
        )
        try:
            completion = client.chat.completions.create(
                model=self.settings.model_id,
                messages=messages,
                response_format={"type": "json_object"},
                temperature=self.settings.temperature,
            )
        except OpenAIError as exc:
            raise ExternalServiceError(str(exc)) from exc

        if not completion.choices:
            return None
        return completion.choices[0].message.content
