# /app/services/ai_service.py

import os
import json
from typing import List, Dict, Any
from dotenv import load_dotenv
import httpx

from .prompt_library import HEALTH_CHECK_MESSAGES
from .service_errors import UpstreamUnavailableError, UpstreamError, UpstreamFormatError

# --- CONFIGURATION ---
load_dotenv()
AI_ENDPOINT_URL = os.getenv("AI_ENDPOINT_URL", "http://localhost:4000/integrations/google-gemini-2-5-pro/")
AI_API_KEY = os.getenv("AI_API_KEY", "").strip()
AI_TIMEOUT_SECONDS = float(os.getenv("AI_TIMEOUT_SECONDS", "30"))

UPSTREAM_DETAIL_LIMIT = 200
HEALTH_SAMPLE_LIMIT = 300


def _build_client() -> httpx.AsyncClient:
    """Every outbound call gets its own client with a bounded timeout."""
    return httpx.AsyncClient(timeout=AI_TIMEOUT_SECONDS)


def _headers() -> Dict[str, str]:
    headers = {"Content-Type": "application/json"}
    if AI_API_KEY:
        headers["Authorization"] = f"Bearer {AI_API_KEY}"
    return headers


def _upstream_detail(response: httpx.Response) -> str:
    if response.reason_phrase:
        return response.reason_phrase
    body = response.text[:UPSTREAM_DETAIL_LIMIT] if response.text else ""
    return body or "Unknown integration error"


def _extract_message_content(envelope: Any) -> str:
    """Pulls choices[0].message.content out of a chat-completion envelope."""
    try:
        content = envelope["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return ""
    return content if isinstance(content, str) else ""


async def generate_structured_json(messages: List[Dict[str, str]], json_schema: Dict[str, Any]) -> Dict[str, Any]:
    """
    Sends a chat-style message list plus a JSON-schema constraint to the AI
    endpoint and returns the decoded JSON object from the first choice.

    Raises:
        UpstreamUnavailableError: the endpoint could not be reached.
        UpstreamError: the endpoint answered with a non-2xx status.
        UpstreamFormatError: the envelope or its content is not usable JSON.
    """
    payload = {"messages": messages, "json_schema": json_schema}

    try:
        async with _build_client() as client:
            response = await client.post(AI_ENDPOINT_URL, json=payload, headers=_headers())
    except httpx.HTTPError as e:
        print(f"ERROR connecting to AI endpoint: {e!r}")
        raise UpstreamUnavailableError("Failed to connect to AI service", detail=str(e) or "Network error")

    if not response.is_success:
        print(f"ERROR AI generation failed: [{response.status_code}] {response.reason_phrase} -> {response.text[:500]}")
        raise UpstreamError(
            "AI generation failed",
            detail=_upstream_detail(response),
            upstream_status=response.status_code,
        )

    try:
        envelope = response.json()
    except ValueError as e:
        print(f"ERROR parsing AI response envelope: {e}")
        raise UpstreamFormatError("Failed to parse AI response", detail=str(e))

    if not isinstance(envelope, dict):
        raise UpstreamFormatError("Failed to parse AI response", detail="Response envelope is not an object")
    if envelope.get("error"):
        print(f"ERROR AI response carried an error: {envelope['error']}")
        raise UpstreamFormatError("Failed to parse AI response", detail=str(envelope["error"]))

    try:
        content = json.loads(_extract_message_content(envelope))
    except ValueError as e:
        print(f"ERROR parsing AI message content: {e}")
        raise UpstreamFormatError("Unexpected AI response format", detail="Could not parse content")

    if not isinstance(content, dict):
        raise UpstreamFormatError("Unexpected AI response format", detail="Content is not a JSON object")
    return content


async def ping() -> Dict[str, Any]:
    """
    Sends a minimal message to the AI endpoint and reports what came back.
    Connection failures propagate as UpstreamUnavailableError.
    """
    try:
        async with _build_client() as client:
            response = await client.post(
                AI_ENDPOINT_URL,
                json={"messages": HEALTH_CHECK_MESSAGES},
                headers=_headers(),
            )
    except httpx.HTTPError as e:
        print(f"ERROR AI health check could not connect: {e!r}")
        raise UpstreamUnavailableError("Failed to connect to AI service", detail=str(e) or "Network error")

    return {
        "ok": response.is_success,
        "status": response.status_code,
        "status_text": response.reason_phrase,
        "endpoint": AI_ENDPOINT_URL,
        "sample": response.text[:HEALTH_SAMPLE_LIMIT],
    }
