from typing import Literal

from .base import PaginatedRequest, PaginatedResult, ProtocolModel, Request, Result
from .content import AnyContent, Role


class PromptArgument(ProtocolModel):
    name: str
    description: str | None = None
    required: bool = False


class Prompt(ProtocolModel):
    """
    A prompt or prompt template offered by the server. The messages themselves
    come from `prompts/get`.
    """

    name: str
    description: str | None = None
    arguments: list[PromptArgument] | None = None


class PromptMessage(ProtocolModel):
    role: Role
    content: AnyContent


class ListPromptsRequest(PaginatedRequest):
    method: Literal["prompts/list"] = "prompts/list"


class ListPromptsResult(PaginatedResult):
    prompts: list[Prompt]


class GetPromptRequest(Request):
    """
    Fetch one prompt. For templates, the server fills `arguments` in.
    """

    method: Literal["prompts/get"] = "prompts/get"
    name: str
    arguments: dict[str, str] | None = None


class GetPromptResult(Result):
    description: str | None = None
    messages: list[PromptMessage]
