from __future__ import annotations

"""
Generation Backend Client.

Thin HTTP client for the website generation service. The '/template'
endpoint classifies the user prompt and returns the bootstrap prompts; the
'/chat' endpoint returns the model response containing the action markup.
"""

import logging
from typing import Any, Dict, List

import requests

from sitecrafter.domain.errors import GenerationError
from sitecrafter.infra.network.common import DEFAULT_TIMEOUT, JSON_HEADERS, join_url

logger = logging.getLogger(__name__)

TEMPLATE_ENDPOINT = "/template"
CHAT_ENDPOINT = "/chat"


class GenerationClient:
    """
    Client for the POST /template and POST /chat endpoints.
    """

    def __init__(self, base_url: str, timeout: int = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url
        self.timeout = timeout

    def request_template(self, prompt: str) -> Dict[str, Any]:
        """
        Request the project template for a natural language prompt.

        Args:
            prompt: User description of the website.

        Returns:
            Dict[str, Any]: Payload with 'prompts' and 'uiPrompts' lists.

        Raises:
            GenerationError: On transport failure or malformed payload.
        """
        data = self._post(TEMPLATE_ENDPOINT, {"prompt": prompt.strip()})

        prompts = data.get("prompts")
        ui_prompts = data.get("uiPrompts")
        if not isinstance(prompts, list) or not isinstance(ui_prompts, list) or not ui_prompts:
            logger.warning("Network: Template payload is missing 'prompts' or 'uiPrompts'.")
            raise GenerationError("Malformed template response.")

        return {"prompts": [str(p) for p in prompts], "uiPrompts": [str(p) for p in ui_prompts]}

    def chat(self, messages: List[Dict[str, str]]) -> str:
        """
        Send the conversation and return the model response text.

        Args:
            messages: Ordered {'role', 'content'} records.

        Returns:
            str: Raw model response (action markup included).

        Raises:
            GenerationError: On transport failure or malformed payload.
        """
        data = self._post(CHAT_ENDPOINT, {"messages": messages})

        response = data.get("response")
        if not isinstance(response, str):
            logger.warning("Network: Chat payload is missing the 'response' field.")
            raise GenerationError("Malformed chat response.")

        logger.info(f"Network: Received chat response ({len(response)} chars).")
        return response

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _post(self, endpoint: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        url = join_url(self.base_url, endpoint)
        logger.debug(f"Network: POST {url}")

        try:
            response = requests.post(url, json=payload, headers=JSON_HEADERS, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.exceptions.Timeout:
            logger.warning(f"Network: Request to {url} timed out after {self.timeout}s.")
            raise GenerationError(f"Request to {endpoint} timed out.") from None
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error(f"Network: Backend answered {status} for {url}.")
            raise GenerationError(f"Backend error on {endpoint}.", status_code=status) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Network: Communication error with {url}: {e}")
            raise GenerationError(f"Communication error on {endpoint}.") from e
        except ValueError as e:
            logger.error(f"Network: Invalid JSON received from {url}: {e}")
            raise GenerationError(f"Invalid JSON from {endpoint}.") from e

        if not isinstance(data, dict):
            logger.warning("Network: Received malformed payload (Root is not a dictionary).")
            raise GenerationError(f"Malformed payload from {endpoint}.")
        return data
