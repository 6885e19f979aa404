#!/usr/bin/env python3
"""
Filehand - Text File Utility

Main entry point for the Filehand CLI application.
"""

import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from core import ActionType, AuditLogger, OperationResult, load_config
from modules.text_files import FileHandler


console = Console()
err_console = Console(stderr=True)


def get_file_handler(ctx: click.Context) -> FileHandler:
    """Get a file handler configured from the --config file."""
    return FileHandler(config=ctx.obj["config"])


def report(result: OperationResult, success_message: str) -> None:
    """Print the outcome of a mutating operation, exiting 1 on failure."""
    if result.success:
        console.print(f"[green]{escape(success_message)}[/green]")
        return
    err_console.print(f"[red]{result.failure.value}:[/red] {escape(result.message or '')}")
    sys.exit(1)


@click.group()
@click.version_option(version="0.1.0", prog_name="Filehand")
@click.option("--config", "config_path", default="config.yaml", show_default=True,
              help="Path to the YAML configuration file.")
@click.pass_context
def filehand(ctx, config_path):
    """
    Filehand - read, write and edit text files and directories.
    """
    ctx.ensure_object(dict)
    ctx.obj["config"] = load_config(config_path)


@filehand.command()
@click.argument("path")
@click.pass_context
def read(ctx, path):
    """Print the contents of a file."""
    result = get_file_handler(ctx).read_file(path)
    if not result.success:
        report(result, "")
    click.echo(result.value, nl=False)


@filehand.command()
@click.argument("path")
@click.argument("text")
@click.pass_context
def write(ctx, path, text):
    """Overwrite a file with TEXT."""
    report(get_file_handler(ctx).write_file(path, text), f"Wrote {path}")


@filehand.command()
@click.argument("path")
@click.argument("text")
@click.pass_context
def append(ctx, path, text):
    """Append TEXT to a file."""
    report(get_file_handler(ctx).append_to_file(path, text), f"Appended to {path}")


@filehand.command()
@click.argument("path")
@click.argument("line_number", type=int)
@click.argument("text")
@click.pass_context
def modify(ctx, path, line_number, text):
    """Replace line LINE_NUMBER (1-based) of a file with TEXT."""
    report(get_file_handler(ctx).modify_file_line(path, line_number, text),
           f"Modified line {line_number} of {path}")


@filehand.command()
@click.argument("path")
@click.pass_context
def delete(ctx, path):
    """Delete a file or an empty directory."""
    report(get_file_handler(ctx).delete_file(path), f"Deleted {path}")


@filehand.command()
@click.argument("path")
@click.option("--recursive", "-r", is_flag=True, help="Remove the directory and its contents.")
@click.pass_context
def rmdir(ctx, path, recursive):
    """Remove a directory."""
    report(get_file_handler(ctx).remove_directory(path, recursive=recursive),
           f"Removed {path}")


@filehand.command()
@click.argument("path")
@click.pass_context
def mkdir(ctx, path):
    """Create a directory and any missing parents."""
    report(get_file_handler(ctx).create_directory(path), f"Created {path}")


@filehand.command()
@click.argument("path", default=".")
@click.pass_context
def ls(ctx, path):
    """List the immediate contents of a directory."""
    result = get_file_handler(ctx).list_directory(path)
    if not result.success:
        report(result, "")

    console.print(f"Contents of directory: {path}", markup=False)
    for entry in result.value:
        console.print(f"{'[D]' if entry.is_dir else '[F]'} {entry.name}", markup=False)


@filehand.command()
@click.option("--limit", default=20, show_default=True, help="Number of entries to show.")
@click.option("--failed", is_flag=True, help="Only show failed operations.")
@click.option("--action", type=click.Choice([a.value for a in ActionType]),
              help="Only show operations of this type.")
@click.option("--export", "export_format", type=click.Choice(["json", "csv"]),
              help="Print the whole log in this format instead of a table.")
@click.option("--clear", is_flag=True, help="Back up and empty the log.")
@click.pass_context
def audit(ctx, limit, failed, action, export_format, clear):
    """View the audit log."""
    logger = AuditLogger(ctx.obj["config"].audit_log)

    if clear:
        if click.confirm("Clear the audit log?"):
            logger.clear(confirm=True)
            console.print("[green]Audit log cleared.[/green]")
        return

    if export_format:
        click.echo(logger.export(format=export_format))
        return

    if failed:
        entries = logger.get_failed_actions(limit=limit)
    elif action:
        entries = logger.get_by_action_type(ActionType(action), limit=limit)
    else:
        entries = logger.get_recent(limit=limit)

    if not entries:
        console.print("[dim]No audit entries found.[/dim]")
        return

    table = Table(title="Recent Audit Log")
    table.add_column("Time", style="dim")
    table.add_column("Action")
    table.add_column("Target")
    table.add_column("Status")
    table.add_column("Result")

    for entry in entries:
        time_str = entry.timestamp.split("T")[1].split(".")[0] if "T" in entry.timestamp else entry.timestamp

        status_str = entry.status
        if entry.status == "executed":
            status_str = f"[green]{entry.status}[/green]"
        elif entry.status == "failed":
            status_str = f"[red]{entry.status}[/red]"

        table.add_row(
            time_str,
            entry.action_type,
            escape(entry.target),
            status_str,
            escape(entry.result or "")
        )

    console.print(table)


@filehand.command("config")
@click.pass_context
def show_config(ctx):
    """Show the active configuration."""
    config = ctx.obj["config"]
    console.print("\n[bold]Configuration:[/bold]")
    for key, value in config.to_dict().items():
        console.print(f"  {key}: {value}")


@filehand.command()
@click.option("--workdir", default=".", show_default=True,
              help="Directory in which the demo file and folder are created.")
@click.pass_context
def demo(ctx, workdir):
    """Run a sample write/read/append/modify/delete/list sequence."""
    handler = get_file_handler(ctx)
    test_file = Path(workdir) / "test.txt"
    test_dir = Path(workdir) / "test_dir"

    console.print(Panel.fit("[bold blue]Filehand Demo[/bold blue]", title="Demo"))

    def step(result: OperationResult, label: str) -> None:
        if result.success:
            console.print(f"{label} successful.")
        else:
            console.print(f"{label} failed: [red]{escape(result.message or '')}[/red]")

    def show(label: str) -> None:
        result = handler.read_file(test_file)
        if result.success:
            console.print(f"\n{label}:\n{result.value}", markup=False)

    step(handler.write_file(test_file, "Hello, this is a test file.\n"), "File write")
    show("File content")
    step(handler.append_to_file(test_file, "This is appended text.\n"), "File append")
    show("File content after append")
    step(handler.modify_file_line(test_file, 1, "Modified first line."), "File modify")
    show("File content after modify")
    step(handler.delete_file(test_file), "File delete")
    step(handler.create_directory(test_dir), "Directory create")

    listing = handler.list_directory(test_dir)
    if listing.success:
        console.print(f"Contents of directory: {test_dir}", markup=False)
        for entry in listing.value:
            console.print(f"{'[D]' if entry.is_dir else '[F]'} {entry.name}", markup=False)

    step(handler.remove_directory(test_dir), "Directory delete")


if __name__ == "__main__":
    filehand()
