'''Visit CLI 진입점(KR). Visit CLI entrypoint (EN).'''

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import List, Sequence

import click
import yaml
from pydantic import ValidationError

from core import CommandError, VisitorConfig, configure_logging, utc_now
from src.visitor import (
    CancellationToken,
    FileSystemVisitor,
    StatisticsCollector,
    VisitEvent,
    VisitEventKind,
    VisitorError,
)

LOGGER = logging.getLogger(__name__)


def _load_config(config_file: Path | None) -> VisitorConfig:
    '''구성 파일을 읽는다 · Load configuration file.'''

    if config_file is None:
        return VisitorConfig()
    try:
        return VisitorConfig.from_file(config_file)
    except (OSError, ValueError, ValidationError, yaml.YAMLError) as exc:
        raise CommandError(str(exc), stage='config', config_path=config_file) from exc


def _merge(
    config: VisitorConfig,
    root: Path | None,
    patterns: Sequence[str],
    extensions: Sequence[str],
) -> VisitorConfig:
    '''명령행 값을 설정에 덮어쓴다 · Overlay command line values.'''

    merged = config.model_copy()
    if root is not None:
        merged.root = root
    if patterns:
        merged.patterns = tuple(patterns)
    if extensions:
        merged.extensions = tuple(extensions)
    return merged


def _build_visitor(config: VisitorConfig, token: CancellationToken) -> FileSystemVisitor:
    return FileSystemVisitor(
        token,
        config.build_filter(),
        provider=config.build_provider(),
        cancel_on_finish=config.cancel_on_finish,
    )


@click.group()
@click.option(
    '--config-file',
    type=click.Path(path_type=Path),
    default=None,
    help='구성 파일 경로 · Config file path',
)
@click.option('--verbose', is_flag=True, help='상세 로그 · Verbose logs')
@click.option('--quiet', is_flag=True, help='간략 로그 · Quiet logs')
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='로그 파일 경로 · Log file path',
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: Path | None,
    verbose: bool,
    quiet: bool,
    log_file: Path | None,
) -> None:
    '''디렉터리 트리 방문 CLI · Directory tree visitor CLI.'''

    config = _load_config(config_file)
    level = config.log_level
    if verbose:
        level = 'DEBUG'
    if quiet:
        level = 'WARNING'
    configure_logging(log_file or config.log_file, level=level)
    ctx.obj = {'config': config}


@cli.command()
@click.argument('root', required=False, type=click.Path(path_type=Path))
@click.option('--pattern', 'patterns', multiple=True, help='글롭 필터 · Glob filter')
@click.option('--ext', 'extensions', multiple=True, help='확장자 필터 · Extension filter')
@click.option('--matches-only', is_flag=True, help='매칭 파일만 출력 · Print matches only')
@click.option(
    '--limit',
    type=click.IntRange(min=1),
    default=None,
    help='매칭 N개 후 취소 · Cancel after N matches',
)
@click.option('--json', 'as_json', is_flag=True, help='JSON 출력 · JSON output')
@click.pass_context
def files(
    ctx: click.Context,
    root: Path | None,
    patterns: Sequence[str],
    extensions: Sequence[str],
    matches_only: bool,
    limit: int | None,
    as_json: bool,
) -> None:
    '''파일 경로를 나열한다 · List file paths.'''

    config = _merge(ctx.obj['config'], root, patterns, extensions)
    token = CancellationToken()
    visitor = _build_visitor(config, token)
    matched: set[str] = set()
    state = {'cancelled': False}

    def _on_match(event: VisitEvent) -> None:
        matched.add(event.path)
        if limit is not None and len(matched) > limit:
            LOGGER.info('match limit %d reached, cancelling', limit)
            state['cancelled'] = True
            token.cancel()

    visitor.subscribe(VisitEventKind.FILTERED_FILE_FOUND, _on_match)
    produced: List[str] = []
    match_count = 0
    try:
        for path in visitor.iter_files(config.root):
            if path in matched:
                match_count += 1
            elif matches_only:
                continue
            if as_json:
                produced.append(path)
            else:
                click.echo(path)
    except VisitorError as exc:
        LOGGER.error('traversal failed: %s', exc)
        raise click.ClickException(str(exc)) from exc
    if as_json:
        click.echo(
            json.dumps(
                {
                    'stage': 'files',
                    'root': str(config.root),
                    'files': produced,
                    'matches': match_count,
                    'cancelled': state['cancelled'],
                    'timestamp': utc_now(),
                },
                ensure_ascii=False,
            )
        )


@cli.command()
@click.argument('root', required=False, type=click.Path(path_type=Path))
@click.option('--pattern', 'patterns', multiple=True, help='글롭 필터 · Glob filter')
@click.option('--ext', 'extensions', multiple=True, help='확장자 필터 · Extension filter')
@click.pass_context
def stats(
    ctx: click.Context, root: Path | None, patterns: Sequence[str], extensions: Sequence[str]
) -> None:
    '''순회 통계를 출력한다 · Print traversal statistics.'''

    config = _merge(ctx.obj['config'], root, patterns, extensions)
    visitor = _build_visitor(config, CancellationToken())
    collector = StatisticsCollector().attach(visitor)
    try:
        produced = visitor.enumerate_files(config.root)
    except VisitorError as exc:
        LOGGER.error('traversal failed: %s', exc)
        raise click.ClickException(str(exc)) from exc
    payload = {'stage': 'stats', 'root': str(config.root), 'produced': len(produced)}
    payload.update(collector.stats.to_payload())
    payload['timestamp'] = utc_now()
    click.echo(json.dumps(payload, ensure_ascii=False))


def main(argv: Sequence[str] | None = None) -> int:
    '''CLI 진입점을 실행한다 · Execute CLI entry point.'''

    argv = sys.argv[1:] if argv is None else argv
    try:
        result = cli.main(args=list(argv), prog_name='visit', standalone_mode=False)
    except CommandError as exc:
        click.echo(json.dumps(exc.to_payload(), ensure_ascii=False), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.exceptions.Abort:
        click.echo('Aborted!', err=True)
        return 1
    return result if isinstance(result, int) else 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
