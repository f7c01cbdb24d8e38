"""Click commands for comparing catalog files.

Exit status of ``catdelta diff``:

    0  delta produced (and any ``--assert`` held)
    1  a catalog could not be read or has the wrong shape
    4  ``--assert equal`` failed
    5  ``--assert compliant`` failed
"""

from __future__ import annotations

from pathlib import Path

import click

from catdelta import __version__
from catdelta.catalog.loader import CatalogError, load_catalog_file
from catdelta.config import load_config
from catdelta.delta.catalog import build_catalog_delta, verdict
from catdelta.models.delta import CatalogDelta
from catdelta.observability.logging import LOG_LEVELS, get_logger, setup_logging
from catdelta.serialize import to_json

EXIT_NOT_EQUAL = 4
EXIT_NOT_COMPLIANT = 5

_log = get_logger("cli")


def format_summary(delta: CatalogDelta) -> str:
    """Render the counts of *delta* as a short human-readable report."""
    env = f"{delta.baseline_env or '-'} -> {delta.preview_env or '-'}"
    lines = [
        f"Catalog delta ({env}): {verdict(delta).value}",
        f"  resources  baseline={delta.baseline_resource_count} preview={delta.preview_resource_count} "
        f"added={delta.added_resource_count} missing={delta.missing_resource_count} "
        f"conflicting={delta.conflicting_resource_count} equal={delta.equal_resource_count}",
        f"  attributes added={delta.added_attribute_count} missing={delta.missing_attribute_count} "
        f"conflicting={delta.conflicting_attribute_count} equal={delta.equal_attribute_count}",
        f"  edges      baseline={delta.baseline_edge_count} preview={delta.preview_edge_count} "
        f"added={delta.added_edge_count} missing={delta.missing_edge_count}",
    ]
    if delta.tags_ignored:
        lines.append("  (tags ignored)")
    if not delta.version_equal:
        lines.append("  (catalog versions differ)")
    for conflict in delta.conflicting_resources:
        lines.append(f"  ! {conflict.type}[{conflict.title}] (id {conflict.diff_id})")
        for attr in conflict.conflicting_attributes:
            mark = "~" if attr.compliant else "x"
            lines.append(f"      {mark} {attr.name}: {attr.baseline_value!r} -> {attr.preview_value!r}")
    return "\n".join(lines)


@click.group()
@click.version_option(__version__, prog_name="catdelta")
def cli() -> None:
    """Compare a baseline catalog with a preview catalog."""


@cli.command()
@click.argument("baseline", type=click.Path(dir_okay=False, path_type=Path))
@click.argument("preview", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--ignore-tags/--no-ignore-tags", default=None, help="Do not report tag differences.")
@click.option("--verbose/--no-verbose", default=None, help="Keep attributes of added and missing resources.")
@click.option("--view", type=click.Choice(["diff", "summary"]), default="diff", show_default=True)
@click.option("--output", "-o", type=click.Path(dir_okay=False, writable=True, path_type=Path), default=None)
@click.option(
    "--assert",
    "assertion",
    type=click.Choice(["equal", "compliant"]),
    default=None,
    help="Exit non-zero unless the preview is equal (4) or compliant (5).",
)
@click.option("--log-level", type=click.Choice(LOG_LEVELS), default=None)
def diff(
    baseline: Path,
    preview: Path,
    ignore_tags: bool | None,
    verbose: bool | None,
    view: str,
    output: Path | None,
    assertion: str | None,
    log_level: str | None,
) -> None:
    """Compute the delta between BASELINE and PREVIEW catalog files."""
    try:
        config = load_config()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    setup_logging(log_level or config.log.level, config.log.json_output)

    try:
        delta = build_catalog_delta(
            load_catalog_file(baseline, "baseline"),
            load_catalog_file(preview, "preview"),
            config.delta,
            ignore_tags=ignore_tags,
            verbose=verbose,
        )
    except CatalogError as exc:
        _log.error("diff_failed", baseline=str(baseline), preview=str(preview), error=str(exc))
        raise click.ClickException(str(exc)) from exc

    text = to_json(delta) if view == "diff" else format_summary(delta)
    if output is None:
        click.echo(text)
    else:
        output.write_text(text + "\n", encoding="utf-8")
        _log.info("delta_written", path=str(output), view=view)

    if assertion == "equal" and not delta.preview_equal:
        raise SystemExit(EXIT_NOT_EQUAL)
    if assertion == "compliant" and not delta.preview_compliant:
        raise SystemExit(EXIT_NOT_COMPLIANT)
