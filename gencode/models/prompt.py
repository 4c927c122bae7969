from typing import Literal, Union
from pydantic import BaseModel


class DirectPrompt(BaseModel):
    """Prompt given as command-line words."""

    kind: Literal["direct"] = "direct"
    text: str


class PipedPrompt(BaseModel):
    """Prompt arriving on a redirected stdin."""

    kind: Literal["piped"] = "piped"


class InteractivePrompt(BaseModel):
    """Prompt composed in the user's editor."""

    kind: Literal["interactive"] = "interactive"


class AbsentPrompt(BaseModel):
    kind: Literal["absent"] = "absent"


PromptSource = Union[DirectPrompt, PipedPrompt, InteractivePrompt, AbsentPrompt]
