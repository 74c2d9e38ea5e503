"""HTTP client for Ollama-style text generation endpoints."""

from __future__ import annotations

import json
import logging

import httpx
from pydantic import ValidationError

from phrasal_core.ports.generation import (
    DecodeError,
    GenerationClientProtocol,
    GenerationErrorCode,
    GenerationErrorDetails,
    GenerationErrorInfo,
    TransportError,
    UpstreamStatusError,
)
from phrasal_schemas.generation import GenerationRequest, GenerationResponse

_log = logging.getLogger(__name__)

_BODY_EXCERPT_CHARS = 200


class GenerationClient(GenerationClientProtocol):
    """Blocking client issuing one non-streaming generation request per call."""

    def __init__(
        self,
        http_client: httpx.Client | None = None,
        *,
        timeout_s: float | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            http_client: Optional pre-configured HTTP client for dependency
                injection. If None, a client is created per request.
            timeout_s: Request timeout in seconds when no client is injected
                (None waits indefinitely).
        """
        self._http_client = http_client
        self.timeout_s = timeout_s

    def generate(self, endpoint: str, model: str, prompt: str) -> str:
        """Send a generation request and return the generated text.

        Args:
            endpoint: Generation endpoint URL.
            model: Model identifier.
            prompt: Prompt text.

        Returns:
            str: The envelope's response text, uninterpreted.
        """
        request = GenerationRequest(model=model, prompt=prompt, stream=False)
        _log.debug(
            "POST %s model=%s prompt_chars=%d", endpoint, model, len(prompt)
        )
        if self._http_client is not None:
            response = self._post(self._http_client, endpoint, request)
        else:
            with httpx.Client(timeout=self.timeout_s) as client:
                response = self._post(client, endpoint, request)
        _log.debug("Response %d from %s", response.status_code, endpoint)

        if response.status_code != httpx.codes.OK:
            raise _upstream_status_error(endpoint, response)
        return _decode_envelope(endpoint, response.content).response

    def _post(
        self, client: httpx.Client, endpoint: str, request: GenerationRequest
    ) -> httpx.Response:
        """Issue the POST and read the whole body.

        Args:
            client: HTTP client to use.
            endpoint: Generation endpoint URL.
            request: Request payload.

        Returns:
            httpx.Response: Fully read response.

        Raises:
            TransportError: If the endpoint cannot be reached.
            DecodeError: If the body cannot be decoded per its Content-Encoding.
        """
        try:
            return client.post(
                endpoint,
                content=request.model_dump_json(),
                headers={"Content-Type": "application/json"},
            )
        except httpx.DecodingError as exc:
            raise DecodeError(
                GenerationErrorInfo(
                    code=GenerationErrorCode.DECODE_ERROR,
                    message=f"Could not decode response body from {endpoint}: {exc}",
                    details=GenerationErrorDetails(endpoint=endpoint),
                )
            ) from exc
        except (httpx.TransportError, httpx.InvalidURL) as exc:
            raise TransportError(
                GenerationErrorInfo(
                    code=GenerationErrorCode.TRANSPORT_ERROR,
                    message=f"Could not reach {endpoint}: {exc}",
                    details=GenerationErrorDetails(endpoint=endpoint),
                )
            ) from exc


def _decode_envelope(endpoint: str, body: bytes) -> GenerationResponse:
    try:
        return GenerationResponse.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError(
            GenerationErrorInfo(
                code=GenerationErrorCode.DECODE_ERROR,
                message=f"Response from {endpoint} is not a generation envelope",
                details=GenerationErrorDetails(
                    endpoint=endpoint,
                    provided=_excerpt(body),
                ),
            )
        ) from exc


def _upstream_status_error(
    endpoint: str, response: httpx.Response
) -> UpstreamStatusError:
    message = f"Received status code {response.status_code} from {endpoint}"
    reason = _server_error_message(response.content)
    if reason:
        message = f"{message}: {reason}"
    return UpstreamStatusError(
        GenerationErrorInfo(
            code=GenerationErrorCode.UPSTREAM_STATUS,
            message=message,
            details=GenerationErrorDetails(
                endpoint=endpoint,
                status_code=response.status_code,
                provided=_excerpt(response.content) or None,
            ),
        )
    )


def _server_error_message(body: bytes) -> str | None:
    """Extract the server's error text from a non-200 body.

    Returns:
        str | None: The JSON "error" field when present, otherwise a body
            excerpt, or None for an empty body.
    """
    try:
        payload = json.loads(body)
    except ValueError:
        return _excerpt(body) or None
    if isinstance(payload, dict) and isinstance(payload.get("error"), str):
        return payload["error"]
    return _excerpt(body) or None


def _excerpt(body: bytes) -> str:
    return body.decode("utf-8", errors="replace").strip()[:_BODY_EXCERPT_CHARS]
