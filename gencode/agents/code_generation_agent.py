import logging
from gencode.models.code import CodeRequest, GeneratedCode
from gencode.services.llm_service import TextGenerator
from gencode.services.prompt_formatter import format_prompt

logger = logging.getLogger("agent.code_generation")


class CodeGenerationAgent:
    """Code Generation: turns a user request into a raw code snippet."""

    def __init__(self, llm_service: TextGenerator):
        self.name = "code_generation"
        self.llm = llm_service

    async def run(self, request: CodeRequest) -> GeneratedCode:
        prompt = format_prompt(request.prompt, request.language)
        logger.info(f"[{self.name}] Sending {len(prompt)} characters")

        text = await self.llm.generate(prompt)

        return GeneratedCode(
            text=text,
            model=getattr(self.llm, "model", ""),
        )
