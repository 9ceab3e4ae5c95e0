"""CLI for the Temuria encyclopedia."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from temuria.config import create_from_config, get_default_config_path, load_config
from temuria.data import LANGUAGES, ArticleResult, LanguageCode
from temuria.errors import ConfigurationError, GenerationError
from temuria.trending import get_trending_topics

logger = logging.getLogger(__name__)

UNREACHABLE_MESSAGE = "The archives are unreachable right now. Please try again later."


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    topic: str | None = None
    language: LanguageCode | None = None
    config: Path
    log: bool = False
    log_dir: str = "logs"
    timeout: float | None = None
    trending: bool = False

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path) -> Path:
        if not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v

    @field_validator("topic")
    @classmethod
    def topic_must_not_be_blank(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        if not v:
            raise ValueError("Topic must not be empty")
        return v

    @field_validator("language", mode="before")
    @classmethod
    def parse_language(cls, v: object) -> LanguageCode | None:
        if v is None:
            return None
        return LanguageCode.parse(str(v))

    @field_validator("timeout")
    @classmethod
    def timeout_must_be_positive(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError("Timeout must be positive")
        return v


def print_article(article: ArticleResult) -> None:
    print(f"\n# {article.title}\n")
    print(f"Last updated: {article.last_updated_display}\n")
    print(article.content)

    if article.images:
        print("\n--- Images ---")
        for url in article.images:
            print(url)

    if article.sources:
        print("\n--- Sources ---")
        for i, source in enumerate(article.sources, 1):
            print(f"{i}. {source.title}")
            print(f"   {source.uri}")


async def run(args: CLIArgs) -> int:
    """Generate and print one article.

    Args:
        args: Validated CLI arguments.

    Returns:
        Process exit code.
    """
    config = load_config(args.config)
    language = args.language or config.default_language

    if args.trending or args.topic is None:
        native_name = LANGUAGES[language].native_name
        print(f"Trending ({native_name}):")
        for topic in get_trending_topics(language):
            print(f"  - {topic}")
        return 0

    requester, run_logger = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
    )

    logger.info(f"Generating article for: {args.topic} ({language})")

    try:
        # The requester imposes no timeout; the CLI applies one if asked
        async with asyncio.timeout(args.timeout):
            article = await requester.generate_article(args.topic, language)
    except ConfigurationError as e:
        logger.error(str(e))
        return 2
    except (GenerationError, TimeoutError):
        logger.error(UNREACHABLE_MESSAGE)
        return 1

    print_article(article)

    if run_logger and run_logger.last_log_path:
        logger.info(f"\nRun log written to: {run_logger.last_log_path}")
    return 0


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="Generate a real-time encyclopedia article.")
    parser.add_argument(
        "topic",
        nargs="?",
        help="Topic to write about (omit to list trending topics)",
    )
    parser.add_argument(
        "--language",
        "-l",
        default=None,
        help=f"Article language: {', '.join(LanguageCode)} (default: from config)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml)",
    )
    parser.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Write a JSON run log for the request",
    )
    parser.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Give up after this many seconds (default: no timeout)",
    )
    parser.add_argument(
        "--trending",
        action="store_true",
        default=False,
        help="List trending topics for the language and exit",
    )

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    load_dotenv()

    ns = parser.parse_args()
    config_path: Path = ns.config if ns.config else get_default_config_path()

    try:
        args = CLIArgs(
            topic=ns.topic,
            language=ns.language,
            config=config_path,
            log=ns.log,
            log_dir=ns.log_dir,
            timeout=ns.timeout,
            trending=ns.trending,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(2)

    try:
        sys.exit(asyncio.run(run(args)))
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(2)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
