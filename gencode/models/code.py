from typing import Optional
from pydantic import BaseModel


class CodeRequest(BaseModel):
    prompt: str
    language: Optional[str] = None


class GeneratedCode(BaseModel):
    text: str
    model: str = ""
