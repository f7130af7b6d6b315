# === FILE: site_reader/cli.py ===
#!/usr/bin/env python3
"""
Command line entry point for the SiteReader crawler.

Commands:
  crawl URL   Crawl a site and print or save the extracted pages
  config      Show the effective configuration

Common options:
  --config PATH       YAML/JSON config (default: configs/default.yaml if present)
  --log-level LEVEL   Logging level (DEBUG, INFO, ...)
  --log-file PATH     Log file (console only when omitted)
  --log-format FORMAT Logging format string

crawl options:
  --max-depth INT            Follow links only from pages above this depth
  --max-pages INT            Page budget
  --same-domain/--any-domain Stay on the start host or not
  --exclude PATTERN          Substring to exclude (repeatable, replaces defaults)
  --renderer browser|http    Headless browser or plain HTTP
  --delay SEC                Pause between pages
  --json PATH                Save the JSON report
  --html PATH                Save the HTML report
  --corpus PATH              Save the text handed to the storage layer
  --pretty                   Indent JSON printed to stdout
  --crawl-timeout SEC        Timeout for the whole crawl

Example:
  site-reader crawl https://docs.example.com --max-pages 50 --json crawl.json
"""
import asyncio
import json
import sys
from dataclasses import asdict
from pathlib import Path

import click
from pydantic import ValidationError

from site_reader import __version__
from site_reader.config import load_config
from site_reader.corpus import build_corpus
from site_reader.logger import DEFAULT_FORMAT, init_logging
from site_reader.report.html_report import render_html
from site_reader.report.json_report import render_json
from site_reader.runner import start_crawl

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteReader, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Path to a YAML or JSON config file.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Logging level'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Log file (console only when omitted)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Logging format string'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """SiteReader command group."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Failed to load configuration: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.argument('url')
@click.option('--max-depth', type=int, default=None, help='Follow links only from pages above this depth')
@click.option('--max-pages', type=int, default=None, help='Page budget')
@click.option('--same-domain/--any-domain', 'same_domain', default=None, help='Stay on the start host')
@click.option('--exclude', 'exclude', multiple=True, help='Excluded URL substring (repeatable)')
@click.option('--renderer', type=click.Choice(['browser', 'http']), default=None, help='How pages are fetched')
@click.option('--delay', type=float, default=None, help='Pause between pages (seconds)')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the JSON report'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the HTML report'
)
@click.option(
    '--corpus', 'corpus_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Save the page text handed to the storage layer'
)
@click.option('--pretty', is_flag=True, help='Indent JSON printed to stdout (2 spaces)')
@click.option('--crawl-timeout', 'crawl_timeout', type=float, default=None, help='Timeout for the whole crawl (seconds)')
@click.pass_context
def crawl_command(ctx, url, max_depth, max_pages, same_domain, exclude, renderer, delay,
                  json_output, html_output, corpus_output, pretty, crawl_timeout):
    """Crawl URL and print or save the extracted pages."""
    try:
        cfg = ctx.obj['config'].with_overrides(
            max_depth=max_depth,
            max_pages=max_pages,
            same_domain=same_domain,
            exclude_patterns=tuple(exclude) or None,
            renderer=renderer,
            delay=delay,
        )
    except ValidationError as e:
        print_error(f'Invalid option: {e}')

    try:
        if crawl_timeout:
            report = asyncio.run(asyncio.wait_for(start_crawl(url, cfg), timeout=crawl_timeout))
        else:
            report = asyncio.run(start_crawl(url, cfg))
    except asyncio.TimeoutError:
        print_error(f'Crawl did not finish within {crawl_timeout} seconds')
    except Exception as e:
        print_error(f'Crawl failed: {e}')

    if corpus_output:
        corpus_output.parent.mkdir(parents=True, exist_ok=True)
        corpus_output.write_text(build_corpus(report.pages), encoding='utf-8')
        click.echo(f'Corpus: {corpus_output}')

    if json_output:
        try:
            click.echo(f'JSON report: {render_json(report, json_output)}')
        except OSError as e:
            print_error(f'Failed to save JSON: {e}')

    if html_output:
        try:
            click.echo(f'HTML report: {render_html(report, html_output)}')
        except OSError as e:
            print_error(f'Failed to save HTML: {e}')

    # nothing saved to a file: print the pages to stdout
    if not (json_output or html_output or corpus_output):
        pages = [asdict(p) for p in report.pages]
        click.echo(json.dumps(pages, ensure_ascii=False, indent=2 if pretty else None))


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Show the effective configuration as JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
