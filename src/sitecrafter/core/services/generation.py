from __future__ import annotations

"""
Generation Workflow Service.

Drives a build conversation against the generation backend: the initial
template request, the first chat turn and every follow-up instruction.
Model responses are turned into actions by an injected markup parser and
queued on the build session. Failures are logged and re-raised, never
retried.
"""

import logging
from typing import Callable, Dict, List

from sitecrafter.core.services.session import BuildSession
from sitecrafter.domain.action_models import Action
from sitecrafter.domain.errors import GenerationError
from sitecrafter.infra.network.generation_client import GenerationClient

logger = logging.getLogger(__name__)

ActionParser = Callable[[str], List[Action]]

ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"


class GenerationWorkflow:
    """
    Conversation state plus the glue between backend, parser and session.
    """

    def __init__(
            self,
            client: GenerationClient,
            parser: ActionParser,
            session: BuildSession,
    ) -> None:
        self._client = client
        self._parser = parser
        self._session = session
        self._messages: List[Dict[str, str]] = []
        self.template_set = False

    @property
    def messages(self) -> List[Dict[str, str]]:
        return list(self._messages)

    def start(self, prompt: str) -> None:
        """
        Bootstrap a project from the user's description.

        Applies the template actions first, then the actions of the first
        chat response, and records the conversation.

        Raises:
            GenerationError: If the backend fails.
        """
        try:
            template = self._client.request_template(prompt)
            self.template_set = True

            prompts: List[str] = template["prompts"]
            ui_prompts: List[str] = template["uiPrompts"]
            self._session.enqueue(self._parser(ui_prompts[0]))

            messages = [_message(ROLE_USER, content) for content in [*prompts, prompt]]
            response = self._client.chat(messages)
        except GenerationError:
            logger.error("Sorry, the requested website could not be generated.")
            raise

        self._session.enqueue(self._parser(response))
        self._messages = messages + [_message(ROLE_ASSISTANT, response)]
        logger.info(f"Generation started; {len(self._session.actions)} action(s) queued.")

    def send_instruction(self, text: str) -> bool:
        """
        Send a follow-up instruction in the current conversation.

        Blank instructions are ignored.

        Returns:
            bool: True if a response was received and applied.

        Raises:
            GenerationError: If the backend fails. History is left unchanged.
        """
        if not text.strip():
            return False

        new_message = _message(ROLE_USER, text)
        try:
            response = self._client.chat(self._messages + [new_message])
        except GenerationError:
            logger.error("Failed to generate a response for the instruction.")
            raise

        self._messages.extend([new_message, _message(ROLE_ASSISTANT, response)])
        self._session.enqueue(self._parser(response))
        return True


def _message(role: str, content: str) -> Dict[str, str]:
    return {"role": role, "content": content}
