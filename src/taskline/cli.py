"""Command-line interface for Taskline."""

import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .config import Config, get_config
from .interpreter import CommandInterpreter, Reply
from .keywords import classify
from .matcher import KeywordPatternMatcher
from .task_list import TaskList


def configure_logging(level: str) -> None:
    """Route taskline log records to stderr at the given level."""
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("taskline").setLevel(level)


def render_reply(reply: Reply, out: Console) -> None:
    """Print an interpreter reply, with a table when it lists tasks."""
    style = "red" if reply.is_error else None
    out.print(reply.message, style=style, markup=False, highlight=False)
    if not reply.tasks:
        return

    config = get_config()
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Task")
    for number, task in reply.tasks:
        table.add_row(str(number), Text(task.describe(config.display_datetime_format)))
    out.print(table)


@click.group()
@click.option("--config", "config_path", type=click.Path(), help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def main(ctx, config_path, verbose):
    """Taskline - keyword-driven task tracking."""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose

    if config_path:
        config = Config.reload(Path(config_path))
    else:
        config = get_config()

    configure_logging("DEBUG" if verbose else config.log_level)
    ctx.obj['console'] = Console(no_color=config.no_color)


@main.command(name="classify")
@click.argument("line")
def classify_command(line):
    """Print the keyword category of LINE."""
    click.echo(classify(line).value)


@main.command()
@click.argument("line")
@click.option("--json", "as_json", is_flag=True, help="Print the task as JSON")
@click.pass_context
def parse(ctx, line, as_json):
    """Build the task described by LINE without storing it."""
    matcher = KeywordPatternMatcher(line)
    task = matcher.build_task()
    out = ctx.obj['console']

    if task is None:
        out.print(f"No task produced ({matcher.keyword_type.value})", style="yellow", markup=False)
        ctx.exit(1)

    if as_json:
        click.echo(json.dumps(task.to_dict(), indent=2))
    else:
        out.print(task.describe(get_config().display_datetime_format), markup=False, highlight=False)


@main.command()
@click.pass_context
def shell(ctx):
    """Read commands until 'bye' or end of input."""
    config = get_config()
    out = ctx.obj['console']
    interpreter = CommandInterpreter(TaskList(), config)

    out.print("Hello! What can I do for you?")
    while True:
        try:
            line = click.prompt("", prompt_suffix=config.prompt, default="", show_default=False)
        except (EOFError, click.Abort):
            break
        reply = interpreter.execute(line)
        render_reply(reply, out)
        if reply.finished:
            break


if __name__ == "__main__":
    main()
