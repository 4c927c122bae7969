from typing import Optional

SYSTEM_PROMPT = """You are an expert code generation assistant.
You will be given a prompt and must return ONLY the raw code snippet that satisfies the request.
Do not add any explanations, conversational text, or markdown fences (like ```). Just the code."""

REQUEST_SEPARATOR = "\n\n--- USER REQUEST ---\n"


def language_clause(language: Optional[str]) -> str:
    if not language or not language.strip():
        return ""
    return f" The user has specified the code should be in {language.strip()}."


def format_prompt(prompt: str, language: Optional[str] = None) -> str:
    """Wrap the raw prompt in the instruction preamble sent to the model."""
    return f"{SYSTEM_PROMPT}{language_clause(language)}{REQUEST_SEPARATOR}{prompt}"
