"""
Rust playground client.
Sends code to the remote execution endpoint and turns the reply into chat text.
"""

from __future__ import annotations

import logging

import httpx

from config import DEFAULT_PLAYGROUND_URL, Config

from .constants import EVAL_TEMPLATE, TOO_LONG_TEXT
from .types import Command, CommandInvocation, ExecutionResult

log = logging.getLogger("rustbot.playground")


class PlaygroundError(Exception):
    """The playground could not be reached or answered with garbage."""


def build_source(invocation: CommandInvocation) -> str:
    """Return the program to run for a command.

    `eval` embeds the body as an expression whose value is Debug-printed;
    `play` runs the body as a complete program.
    """
    if invocation.command == Command.EVAL:
        return EVAL_TEMPLATE.format(body=invocation.code_body)
    return invocation.code_body


def code_wrap(text: str) -> str:
    return f"```{text}```"


def render_result(result: ExecutionResult, max_chars: int = 500) -> str:
    """Fence-wrap stdout (or stderr on failure), replacing oversized output."""
    output = code_wrap(result.stdout if result.success else result.stderr)
    if len(output) <= max_chars:
        return output
    return TOO_LONG_TEXT


class PlaygroundClient:
    """Thin async client for the playground's ``/execute`` endpoint."""

    def __init__(
        self,
        url: str = DEFAULT_PLAYGROUND_URL,
        *,
        channel: str = "stable",
        mode: str = "debug",
        edition: str = "2018",
        timeout: float = 30.0,
        max_chars: int = 500,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.url = url
        self.channel = channel
        self.mode = mode
        self.edition = edition
        self.max_chars = max_chars
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_config(cls, config: Config) -> "PlaygroundClient":
        return cls(
            config.playground_url,
            channel=config.playground_channel,
            mode=config.playground_mode,
            edition=config.playground_edition,
            timeout=float(config.playground_timeout_sec),
            max_chars=config.max_reply_chars,
        )

    def payload(self, source: str) -> dict:
        return {
            "channel": self.channel,
            "mode": self.mode,
            "edition": self.edition,
            "crateType": "bin",
            "tests": False,
            "code": source,
            "backtrace": False,
        }

    async def execute(self, source: str) -> ExecutionResult:
        """POST the source and parse the playground's JSON reply.

        Raises:
            PlaygroundError: on transport failure, timeout, a non-2xx status,
                or a body that is not the expected JSON object.
        """
        try:
            response = await self._http.post(self.url, json=self.payload(source))
            response.raise_for_status()
            data = response.json()
        except httpx.TimeoutException as e:
            raise PlaygroundError("timed out") from e
        except httpx.HTTPStatusError as e:
            raise PlaygroundError(f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise PlaygroundError(str(e) or type(e).__name__) from e
        except ValueError as e:
            raise PlaygroundError("malformed response body") from e

        if not isinstance(data, dict) or not isinstance(data.get("success"), bool):
            raise PlaygroundError("malformed response body")

        return ExecutionResult(
            success=data["success"],
            stdout=str(data.get("stdout") or ""),
            stderr=str(data.get("stderr") or ""),
        )

    async def evaluate(self, invocation: CommandInvocation) -> str:
        """Run a command invocation and return the text to display."""
        source = build_source(invocation)
        log.info(f"Executing {invocation.command.value} ({len(source)} chars) on {self.channel}/{self.mode}")
        result = await self.execute(source)
        if not result.success:
            log.info("Playground run failed to compile or panicked")
        return render_result(result, self.max_chars)

    async def aclose(self):
        if self._owns_client:
            await self._http.aclose()
