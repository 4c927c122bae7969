from typing import Optional


class GencodeError(Exception):
    """Base error for everything the CLI reports to the user.

    ``hint`` is the remediation text; ``command`` is an optional shell line
    the user can copy to fix the problem.
    """

    exit_code = 1

    def __init__(self, message: str, hint: Optional[str] = None, command: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.hint = hint
        self.command = command


class MissingCredentialError(GencodeError):
    def __init__(self, env_var: str = "GEMINI_API_KEY"):
        super().__init__(
            f"Error: {env_var} environment variable is not set.",
            hint="Please get an API key from Google AI Studio and set it:",
            command=f'  export {env_var}="YOUR_API_KEY_HERE"',
        )


class NoPromptError(GencodeError):
    def __init__(self):
        super().__init__(
            "Error: No prompt provided.",
            hint="Please provide a prompt, use -i for interactive mode, or pipe in a prompt.",
        )


class EmptyPromptError(GencodeError):
    def __init__(self):
        super().__init__("Error: Prompt cannot be empty.")


class GenerationError(GencodeError):
    """Remote call or response parsing failed."""


class OutputWriteError(GencodeError):
    """Writing the generated code to disk failed. Reported, never fatal."""

    exit_code = 0

    def __init__(self, message: str, path: str):
        super().__init__(message)
        self.path = path
