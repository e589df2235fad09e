import logging
from typing import Any, Dict

import click

from ..translation.translation_manager import TranslationManager
from ..translation.translators import create_translator
from ..utils.config import (
    AUTO_DETECT,
    TranslationSettings,
    build_default_map,
    default_config_path,
    load_config,
    validate_config,
)
from ..utils.errors import GootragoError
from ..utils.logging_setup import setup_logging
from ..utils.ui import ConsoleUIManager

logger = logging.getLogger(__name__)

ENV_PREFIX = "GOOTRAGO"


def _load_config_callback(ctx: click.Context, param: click.Parameter, value):
    """Read the config file before the other options so it can supply their defaults."""
    if ctx.resilient_parsing:
        return value

    path = value
    if path is None:
        path = default_config_path()
        if not path.exists():
            return None

    try:
        config = load_config(path)
        validate_config(config)
    except GootragoError as e:
        raise click.BadParameter(str(e), ctx=ctx, param=param) from e

    click.echo(f"Using config file: {path}", err=True)
    default_map: Dict[str, Any] = dict(ctx.default_map or {})
    for key, item in build_default_map(config).items():
        # Keep defaults passed in by the caller over the ones from the file
        default_map.setdefault(key, item)
    ctx.default_map = default_map
    return str(path)


def _run(ctx: click.Context, action: str) -> None:
    """Resolve settings, pick the client and run one translation action."""
    opts = ctx.obj
    try:
        settings = TranslationSettings.resolve(**opts['settings'])
        with create_translator(settings) as translator:
            manager = TranslationManager(settings, translator, ui=opts['ui'])
            if action == 'csv':
                manager.translate_csv_file()
            else:
                manager.translate_text_file()
    except GootragoError as e:
        logger.debug("Translation failed", exc_info=True)
        raise click.ClickException(str(e)) from e


@click.group(invoke_without_command=True)
@click.option('--config', type=click.Path(dir_okay=False), is_eager=True,
              expose_value=False, callback=_load_config_callback,
              help='Config file (default is $HOME/.gootrago.yaml)')
@click.option('--input', '-i', 'input', default=None,
              help='Input file to translate (required)')
@click.option('--output', '-o', 'output', default=None,
              help='Output file for translation (required)')
@click.option('--source', '-s', default=AUTO_DETECT, show_default=True,
              help="Source language code (e.g., 'en' for English)")
@click.option('--target', '-t', default=None,
              help="Target language code (e.g., 'uk' for Ukrainian) (required)")
@click.option('--project', '-p', default=None,
              help='Google Cloud Project ID (required for advanced API)')
@click.option('--credentials', '-c', type=click.Path(dir_okay=False), default=None,
              help='Path to Google Cloud credentials JSON file')
@click.option('--advanced', '-a', is_flag=True, default=False,
              help='Use Advanced Google Translate API')
@click.option('--verbose', '-v', count=True,
              help='Increase verbosity (use -v for info, -vv for debug, -vvv for trace)')
@click.option('--quiet', '-q', is_flag=True, default=False,
              help='Only print errors')
@click.option('--progress/--no-progress', default=True,
              help='Print a progress marker every second while translating')
@click.pass_context
def cli(ctx, input, output, source, target, project, credentials, advanced,
        verbose, quiet, progress):
    """CLI Google Translator for text and CSV files.

    Translates the whole input file using either the Basic or the Advanced
    Google Cloud Translation API. The Advanced API requires a Google Cloud
    Project ID.
    """
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj['ui'] = ConsoleUIManager(quiet=quiet, show_progress=progress)
    ctx.obj['settings'] = {
        'input_file': input,
        'output_file': output,
        'target_lang': target,
        'source_lang': source,
        'use_advanced': advanced,
        'project_id': project,
        'credentials_file': credentials,
    }

    if ctx.invoked_subcommand is None:
        _run(ctx, 'text')


@cli.command(name='csv')
@click.option('--column', '-l', multiple=True,
              help="Column to translate, can be repeated or comma separated. "
                   "Numbering starts from '1' or 'A'. Default is every column")
@click.option('--csv-delimiter', default=None,
              help='Delimiter for CSV files (default ",")')
@click.option('--csv-comment', default=None,
              help='Comment character for CSV files')
@click.option('--header/--no-header', default=False,
              help='Keep the first row as an untranslated header')
@click.pass_context
def csv_command(ctx, column, csv_delimiter, csv_comment, header):
    """Translate CSV files or specific columns.

    Keeps the structure of the file and only replaces the translated cells.
    """
    ctx.obj['settings'].update({
        'columns': column,
        'csv_delimiter': csv_delimiter,
        'csv_comment': csv_comment,
        'has_header': header,
    })
    _run(ctx, 'csv')


def main():
    """Entry point for the CLI."""
    cli(obj={}, auto_envvar_prefix=ENV_PREFIX)


if __name__ == '__main__':
    main()
