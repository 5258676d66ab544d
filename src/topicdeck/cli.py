"""Typer-based CLI entry point."""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich import print
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from topicdeck.application.use_cases.base import UseCaseResponse
from topicdeck.config import DEFAULT_PAGE_SIZE, DEFAULT_SHOW_INTERNAL
from topicdeck.di.bootstrap import bootstrap
from topicdeck.di.container import Container
from topicdeck.domain.models import SortOrder, SortSpec, TopicColumnsToSort
from topicdeck.errors import (
    InvalidActionError,
    SettingsError,
    TopicDeckError,
    TopicSourceError,
)
from topicdeck.gui.factories.viewmodel_factory import ViewModelFactory
from topicdeck.gui.services.pagination_service import PaginationParams
from topicdeck.gui.viewmodels.topic_list_viewmodel import TopicListViewModel
from topicdeck.infrastructure.repositories import (
    InMemoryTopicRepository,
    load_topics_json,
    save_topics_json,
)

LOGGER = logging.getLogger(__name__)

app = typer.Typer(help="Browse, delete and purge the topics of a cluster")
console = Console()


class _Session:
    def __init__(self, settings_path: Optional[Path]) -> None:
        self.settings_path = settings_path


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (TopicSourceError, SettingsError, InvalidActionError) as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(1) from exc
        except TopicDeckError as exc:
            typer.echo(f"Unexpected error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output."),
    settings: Optional[Path] = typer.Option(
        None, "--settings", help="Settings JSON providing page size, filter and read-only defaults."
    ),
) -> None:
    _configure_logging(verbose)
    ctx.obj = _Session(settings)


def _open_view(
    ctx: typer.Context,
    topics_file: Path,
    cluster: Optional[str],
    page: int = 1,
    per_page: Optional[int] = None,
    show_internal: Optional[bool] = None,
) -> tuple[TopicListViewModel, InMemoryTopicRepository]:
    session: _Session = ctx.obj or _Session(None)
    default_per_page = DEFAULT_PAGE_SIZE
    default_internal = DEFAULT_SHOW_INTERNAL
    read_only = False
    cluster_name = cluster or "local"
    sort: Optional[SortSpec] = None
    if session.settings_path is not None:
        from topicdeck.settings.manager import SettingsManager

        manager = SettingsManager(path=session.settings_path)
        manager.load()
        default_per_page = manager.per_page
        default_internal = manager.show_internal
        read_only = manager.read_only
        cluster_name = cluster or manager.cluster_name
        if manager.order_by:
            sort = SortSpec(TopicColumnsToSort(manager.order_by))

    repository = load_topics_json(topics_file, cluster_name)
    container = bootstrap(Container(), repository)
    vm = ViewModelFactory(container).create_topic_list_vm(
        cluster_name,
        location=PaginationParams(page=page, per_page=per_page or default_per_page),
        sort=sort,
        show_internal=default_internal if show_internal is None else show_internal,
        read_only=read_only,
    )
    return vm, repository


def _human_bytes(size: int) -> str:
    value = float(size)
    for unit in ("B", "KB", "MB", "GB"):
        if value < 1024 or unit == "GB":
            return f"{value:.0f} {unit}" if unit == "B" else f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} GB"


def _render(vm: TopicListViewModel) -> None:
    table = Table(title=f"All Topics ({vm.cluster_name})")
    table.add_column("Topic Name")
    table.add_column("Total Partitions", justify="right")
    table.add_column("Out of sync replicas", justify="right")
    table.add_column("Replication Factor", justify="right")
    table.add_column("Number of messages", justify="right")
    table.add_column("Size", justify="right")
    for topic in vm.topics:
        name = f"{topic.name} [dim](internal)[/dim]" if topic.is_internal else topic.name
        table.add_row(
            name,
            str(topic.partition_count),
            str(topic.out_of_sync_replicas),
            str(topic.replication_factor),
            str(topic.message_count),
            _human_bytes(topic.segment_size),
        )
    console.print(table)
    if vm.empty_message:
        console.print(vm.empty_message)
    console.print(f"Page {vm.page} of {vm.total_pages} ({vm.per_page} per page)")


def _report(action: str, response: Optional[UseCaseResponse]) -> None:
    if response is None or response.success:
        print(f"[green]{action} finished")
        return
    print(f"[red]{action} finished with errors: {response.error}")
    raise typer.Exit(1)


@app.command("list")
@_handle_errors
def list_topics(
    ctx: typer.Context,
    topics_file: Path = typer.Argument(..., exists=True, dir_okay=False),
    cluster: Optional[str] = typer.Option(None, "--cluster", "-c"),
    search: str = typer.Option("", "--search", "-s", help="Substring of the topic name."),
    sort: Optional[TopicColumnsToSort] = typer.Option(None, "--sort"),
    desc: bool = typer.Option(False, "--desc", help="Sort descending."),
    page: int = typer.Option(1, "--page", min=1),
    per_page: Optional[int] = typer.Option(None, "--per-page", min=1),
    internal: Optional[bool] = typer.Option(None, "--internal/--hide-internal"),
) -> None:
    """Show one page of topics."""

    vm, _ = _open_view(ctx, topics_file, cluster, page, per_page, internal)
    # Apply the filters before mounting so a single fetch goes out; the page
    # is re-applied because each filter change starts over from page 1.
    if search:
        vm.set_search(search)
    if sort is not None:
        vm.set_sort(SortSpec(sort, SortOrder.DESC if desc else SortOrder.ASC))
    vm.set_page(page)
    vm.mount()
    _render(vm)


def _select(vm: TopicListViewModel, names: List[str]) -> None:
    vm.mount()
    for name in names:
        if not vm.is_selected(name):
            vm.toggle_selection(name)


def _confirm_pending(vm: TopicListViewModel, names: List[str], yes: bool, action: str) -> None:
    print(vm.confirmation_message)
    for name in names:
        print(f"  - {name}")
    if yes or typer.confirm("Continue?", default=False):
        response = vm.confirm()
        _report(action, response)
        return
    vm.cancel_confirmation()
    print("[yellow]Cancelled")


@app.command()
@_handle_errors
def delete(
    ctx: typer.Context,
    topics_file: Path = typer.Argument(..., exists=True, dir_okay=False),
    names: List[str] = typer.Argument(..., help="Topics to delete."),
    cluster: Optional[str] = typer.Option(None, "--cluster", "-c"),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
) -> None:
    """Delete the given topics after confirmation."""

    vm, repository = _open_view(ctx, topics_file, cluster)
    _select(vm, names)
    vm.request_delete()
    try:
        _confirm_pending(vm, names, yes, "Delete")
    finally:
        save_topics_json(repository, topics_file)


@app.command()
@_handle_errors
def purge(
    ctx: typer.Context,
    topics_file: Path = typer.Argument(..., exists=True, dir_okay=False),
    names: List[str] = typer.Argument(..., help="Topics whose messages are cleared."),
    cluster: Optional[str] = typer.Option(None, "--cluster", "-c"),
    partition: Optional[List[int]] = typer.Option(
        None, "--partition", "-p", help="Only clear these partitions (single topic only)."
    ),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
) -> None:
    """Purge the messages of the given topics after confirmation."""

    vm, repository = _open_view(ctx, topics_file, cluster)
    if partition:
        if len(names) != 1:
            raise InvalidActionError("--partition can only be used with a single topic")
        vm.mount()
        try:
            _report("Purge", vm.purge_topic(names[0], partition))
        finally:
            save_topics_json(repository, topics_file)
        return

    _select(vm, names)
    vm.request_purge()
    try:
        _confirm_pending(vm, names, yes, "Purge")
    finally:
        save_topics_json(repository, topics_file)


if __name__ == "__main__":  # pragma: no cover
    app()
