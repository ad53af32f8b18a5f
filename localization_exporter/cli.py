"""Command-line interface for localization exporter."""

import sys
import argparse
from pathlib import Path

from .__version__ import __version__
from .utils.config import Config, CONFIG_FILE_NAME, create_default_config, ConfigValidationError
from .utils.logging import configure_logging, get_logger
from .utils.validators import is_valid_exclude_pattern, is_valid_language_code
from .features.poeditor import POEditorClient, POEditorError
from .features.exporter import export_strings, export_stringsdict, load_terms_file


def load_and_validate_config(validate: bool = True, verbose: bool = False) -> Config:
    """
    Load configuration and optionally validate it.

    Args:
        validate: Whether to validate the config
        verbose: Whether to log warnings

    Returns:
        Loaded Config object

    Raises:
        ConfigValidationError: If validation fails with errors
    """
    logger = get_logger()
    config = Config.from_file()

    if validate:
        errors, warnings = config.validate()

        if verbose and warnings:
            for warning in warnings:
                logger.warning(f"Config warning: {warning}")

        if errors:
            logger.error("Configuration errors:")
            for error in errors:
                logger.error(f"   • {error}")
            raise ConfigValidationError(errors)

    return config


def cmd_init(args):
    """Initialize configuration file."""
    logger = get_logger()
    config_path = Path.cwd() / CONFIG_FILE_NAME

    if config_path.exists() and not args.force:
        logger.error(f"Config already exists: {config_path}")
        logger.error("   Use --force to overwrite")
        return 1

    config = create_default_config(project_id=args.project or '')
    config.save(config_path)

    logger.info(f"Created: {config_path}")
    logger.info("\nNext steps:")
    logger.info(f"1. Edit {CONFIG_FILE_NAME} to set your project and languages")
    logger.info("2. Run: localization-exporter export")

    return 0


def _resolve_exclude(args, config: Config):
    if args.no_exclude:
        return None
    if args.exclude is not None:
        return args.exclude
    return config.export.exclude


def _stringsdict_path(args, config: Config, language: str, strings_dir: Path):
    if args.no_stringsdict:
        return None
    if args.stringsdict:
        return Path(args.stringsdict.format(language=language))
    return config.output.stringsdict_path(language, strings_dir)


def cmd_export(args):
    """Generate .strings and .stringsdict files."""
    log_file = Path(args.log_file) if args.log_file else None
    configure_logging(verbose=args.verbose, quiet=args.quiet, log_file=log_file)
    logger = get_logger()

    try:
        config = load_and_validate_config(validate=True, verbose=args.verbose)
    except ConfigValidationError:
        return 1

    languages = args.lang or config.export.languages
    invalid_languages = [lang for lang in (args.lang or []) if not is_valid_language_code(lang)]
    if invalid_languages:
        logger.error(f"Invalid language code(s): {', '.join(invalid_languages)}")
        return 1

    exclude = _resolve_exclude(args, config)
    print_date = args.print_date or config.export.print_date
    strings_dir = Path(args.strings_dir or config.output.strings_dir)
    substitutions = config.export.substitutions

    if not is_valid_exclude_pattern(exclude):
        logger.error(f"Invalid exclude pattern: {exclude!r}")
        return 1

    if args.input and len(languages) > 1:
        logger.error("--input holds a single language export; pass exactly one --lang")
        return 1

    client = None
    if not args.input:
        token = config.poeditor.resolved_token()
        if not token or not config.poeditor.project_id:
            logger.error("POEditor api_token and project_id are required (or use --input)")
            return 1
        client = POEditorClient(token, config.poeditor.project_id)

    for language in languages:
        logger.section(f"Exporting '{language}'")

        try:
            if args.input:
                terms = load_terms_file(Path(args.input))
            else:
                terms = client.fetch_terms(language)
        except POEditorError as e:
            logger.error(f"Could not fetch terms: {e}")
            return 1
        except (OSError, ValueError) as e:
            logger.error(f"Could not read {args.input}: {e}")
            return 1

        export_strings(
            terms,
            language,
            output_dir=strings_dir,
            substitutions=substitutions,
            print_date=print_date,
            exclude=exclude,
        )

        stringsdict_path = _stringsdict_path(args, config, language, strings_dir)
        if stringsdict_path is not None:
            export_stringsdict(
                terms,
                stringsdict_path,
                substitutions=substitutions,
                print_date=print_date,
                exclude=exclude,
            )

    return 0


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='localization-exporter',
        description='Generate Apple .strings and .stringsdict files from POEditor'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # init command
    init_parser = subparsers.add_parser('init', help='Initialize configuration file')
    init_parser.add_argument('--project', '-p', metavar='ID', help='POEditor project id')
    init_parser.add_argument('--force', action='store_true', help='Overwrite existing config')

    # export command
    export_parser = subparsers.add_parser('export', help='Generate localization files')
    export_parser.add_argument('--lang', '-l', nargs='+', metavar='CODE', help='Languages to export (default: from config)')
    export_parser.add_argument('--input', '-i', metavar='FILE', help='Read terms from a POEditor JSON export instead of the API')
    export_parser.add_argument('--strings-dir', metavar='DIR', help='Base directory for .strings files')
    export_parser.add_argument('--stringsdict', metavar='PATH', help='.stringsdict destination ({language} is replaced)')
    export_parser.add_argument('--no-stringsdict', action='store_true', help='Skip .stringsdict generation')
    export_parser.add_argument('--print-date', action='store_true', help='Print the generation date in headers')
    export_parser.add_argument('--exclude', metavar='REGEX', help='Leave out terms matching this pattern')
    export_parser.add_argument('--no-exclude', action='store_true', help='Export every term')
    export_parser.add_argument('--verbose', '-v', action='store_true', help='Show debug output')
    export_parser.add_argument('--quiet', '-q', action='store_true', help='Only show warnings and errors')
    export_parser.add_argument('--log-file', metavar='FILE', help='Also write debug logs to FILE')

    args = parser.parse_args()

    if args.command == 'init':
        return cmd_init(args)
    elif args.command == 'export':
        return cmd_export(args)
    else:
        parser.print_help()
        return 0


if __name__ == '__main__':
    sys.exit(main())
