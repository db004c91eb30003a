"""
Command line entry point.

Resolves configuration from the environment (and an optional .env file),
discovers the project languages, translates the source locale file and
writes one locale file per target language as soon as it is ready.
"""

import argparse
import dataclasses
from pathlib import Path
from typing import List, Optional, Tuple

import httpx

from weglot_i18n import storage
from weglot_i18n.config import ACTION_NAME, AppConfig, load_config, parse_language_list
from weglot_i18n.exceptions import ConfigurationMissing, TranslationError
from weglot_i18n.logger import configure_logging, get_logger
from weglot_i18n.provider import WeglotProvider, fetch_project_settings
from weglot_i18n.provider.weglot import get_httpx_timeout
from weglot_i18n.translation import TranslationBatchOrchestrator, TranslationProgress

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weglot-i18n",
        description="Generate translated i18n JSON files with Weglot.",
    )
    parser.add_argument(
        "--locales-dir",
        help="Directory holding <lang>.json files (overrides WORKING_DIR/LOCALES_DIR)",
    )
    parser.add_argument(
        "--languages",
        help="Comma separated target languages (overrides the Weglot project settings)",
    )
    return parser


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Apply command line overrides on top of the environment config."""
    changes = {}
    if args.locales_dir:
        changes["locales_dir"] = Path(args.locales_dir).resolve()
    if args.languages:
        changes["target_languages"] = parse_language_list(args.languages)
    return dataclasses.replace(config, **changes) if changes else config


def resolve_languages(config: AppConfig, client: Optional[httpx.Client] = None) -> Tuple[str, List[str]]:
    """
    Source and target languages: explicit settings first, then the Weglot
    project settings for whatever is not set.
    """
    source_language = config.source_language
    target_languages = list(config.target_languages)

    if not source_language or not target_languages:
        logger.info(f"{ACTION_NAME} Getting Weglot project settings...")
        settings = fetch_project_settings(
            config.project_id,
            settings_url=config.settings_url,
            timeout=config.timeout,
            client=client,
        )
        source_language = source_language or settings.source_language
        target_languages = target_languages or settings.target_languages

    if not target_languages:
        raise ConfigurationMissing(
            "No enabled target languages found",
            details={"missing_field": "target_languages"},
        )

    return source_language, target_languages


def _log_progress(progress: TranslationProgress):
    if progress.phase == "completed":
        logger.info(
            f"{ACTION_NAME} {progress.current_language_name} done "
            f"({progress.completed_languages}/{progress.total_languages})"
        )


def run(config: AppConfig, client: Optional[httpx.Client] = None) -> List[str]:
    """
    Run the generator with a resolved configuration.

    Returns:
        Language codes whose files were written, in order
    """
    logger.info(f"{ACTION_NAME} Translation files will be placed in: {config.locales_dir}")

    source_language, target_languages = resolve_languages(config, client)
    logger.info(
        f"{ACTION_NAME} Original Language: {source_language}, "
        f"Translating to {len(target_languages)} languages ({','.join(target_languages)})!"
    )

    logger.info(f"{ACTION_NAME} Reading original language json file...")
    source_tree = storage.read_source_document(config.locales_dir, source_language)

    provider = WeglotProvider(
        config.api_key,
        base_url=config.base_url,
        timeout=config.timeout,
        client=client,
    )
    orchestrator = TranslationBatchOrchestrator(
        provider,
        request_url=config.request_url,
        translate_non_string_leaves=config.translate_non_string_leaves,
        strict_batch_alignment=config.strict_batch_alignment,
    )

    written: List[str] = []

    def _write(language, tree):
        path = storage.write_translated_document(config.locales_dir, language, tree)
        written.append(language)
        logger.info(f"{ACTION_NAME} Wrote {path}")

    logger.info(f"{ACTION_NAME} Starting Translation...")
    orchestrator.run(
        source_tree,
        source_language,
        target_languages,
        on_language_done=_write,
        progress_callback=_log_progress,
    )
    return written


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logger.info(f"{ACTION_NAME} Starting up...")

    try:
        config = apply_overrides(load_config(), args)
        configure_logging(config.log_mode)

        with httpx.Client(timeout=get_httpx_timeout(config.timeout)) as client:
            written = run(config, client)

    except TranslationError as e:
        logger.error(f"{ACTION_NAME} Workflow failed! {e}")
        return 1
    except Exception as e:
        logger.error(f"{ACTION_NAME} Workflow failed! {type(e).__name__}: {e}")
        return 1

    logger.info(f"{ACTION_NAME} Finished: {len(written)} language files written")
    return 0
