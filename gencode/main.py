import asyncio
import logging
from typing import Optional

import click

from gencode.agents.code_generation_agent import CodeGenerationAgent
from gencode.config import get_settings
from gencode.errors import GencodeError, GenerationError, NoPromptError
from gencode.models.code import CodeRequest
from gencode.services.console import Status, command_hint, error, hint
from gencode.services.input_resolver import read_prompt, resolve_source
from gencode.services.llm_service import TextGenerator, get_llm_service
from gencode.services.output_sink import deliver

logger = logging.getLogger("gencode")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(verbose: int = 0) -> None:
    if verbose >= 2:
        level = "DEBUG"
    elif verbose == 1:
        level = "INFO"
    else:
        level = get_settings().LOG_LEVEL.upper()
    if level not in LOG_LEVELS:
        error(f"Error: Unknown LOG_LEVEL '{level}'.")
        hint(f"Expected one of {', '.join(LOG_LEVELS)}; falling back to WARNING.")
        level = "WARNING"
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def stdin_is_tty() -> bool:
    return click.get_text_stream("stdin").isatty()


def report(exc: GencodeError) -> None:
    error(exc.message)
    if exc.hint:
        hint(exc.hint)
    if exc.command:
        command_hint(exc.command)


async def run_generation(
    llm: TextGenerator, request: CodeRequest, output: Optional[str] = None
) -> int:
    """Call the model once, then hand the result to the output sink."""
    agent = CodeGenerationAgent(llm)
    status = Status("Sending prompt to Gemini...").start()
    try:
        result = await agent.run(request)
    except GenerationError as e:
        status.fail("Error generating code:")
        error(e.message)
        return e.exit_code
    status.succeed("Code generated successfully!")
    logger.info(f"Received {len(result.text)} characters from {result.model}")
    return await deliver(result, output)


class AliasedGroup(click.Group):
    """Group that also answers to short command aliases."""

    aliases = {"g": "generate"}

    def get_command(self, ctx, cmd_name):
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))

    def resolve_command(self, ctx, args):
        _, cmd, args = super().resolve_command(ctx, args)
        return cmd.name if cmd else None, cmd, args


@click.group(cls=AliasedGroup, invoke_without_command=True)
@click.version_option(package_name="gencode")
@click.option("-v", "--verbose", count=True, help="Log progress to stderr (-vv for debug).")
@click.pass_context
def cli(ctx, verbose):
    """Generate code from a prompt using the Gemini API."""
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)


@click.command("generate", short_help="Generate code using the Gemini API (alias: g).")
@click.argument("prompt", nargs=-1)
@click.option("-i", "--interactive", is_flag=True, help="Run in interactive mode for a multi-line prompt.")
@click.option("-o", "--output", metavar="FILE", help="Save the generated code to a file.")
@click.option("-l", "--language", metavar="LANG", help='Specify the coding language (e.g., "javascript", "python").')
@click.pass_context
def generate(ctx, prompt, interactive, output, language):
    """Generate code using the Gemini API.

    PROMPT words are joined with spaces. Without them the prompt is read
    from piped stdin, or from your editor with -i.
    """
    source = resolve_source(prompt, stdin_is_tty=stdin_is_tty(), interactive=interactive)
    logger.info(f"Prompt source: {source.kind}")

    try:
        text = read_prompt(source)
        llm = get_llm_service(get_settings())
    except NoPromptError as e:
        report(e)
        click.echo()
        click.echo(ctx.get_help())
        ctx.exit(e.exit_code)
    except GencodeError as e:
        report(e)
        ctx.exit(e.exit_code)

    request = CodeRequest(prompt=text, language=language)
    ctx.exit(asyncio.run(run_generation(llm, request, output)))


cli.add_command(generate)


def main():
    cli()


if __name__ == "__main__":
    main()
