import argparse
import logging
import sys
from typing import Optional

from harvest import config as env
from harvest.configs import build_config, load_profile
from harvest.container import Container
from harvest.exceptions import ConfigError, FetchError, InvalidUrlError, PageParseError, ResourceError

logger = logging.getLogger("harvest")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="harvest",
        description="Crawl a site and report how often each uncommon word appears.",
    )
    parser.add_argument("url", nargs="?", help="seed URL (may come from --profile instead)")
    parser.add_argument("-d", "--depth", dest="max_depth", type=int, help="maximum number of hops from the seed")
    parser.add_argument("-l", "--limit", dest="common_word_limit", type=int, help="number of common words to filter out")
    parser.add_argument("-o", "--offsite", dest="follow_offsite", action="store_const", const=True, help="follow links to other hosts")
    parser.add_argument("-m", "--min-length", dest="min_length", type=int, help="minimum token length")
    parser.add_argument("-c", "--min-count", dest="min_count", type=int, help="only report words seen at least this often")
    parser.add_argument("-u", "--user-agent", dest="user_agent", help="User-Agent for requests")
    parser.add_argument("-H", "--header", dest="headers", action="append", metavar="'NAME: VALUE'", help="extra request header (repeatable)")
    parser.add_argument("-w", "--words", dest="common_words_path", help="common-word list file")
    parser.add_argument("--output", help="write the report to this file instead of stdout")
    parser.add_argument("--profile", help="YAML crawl profile")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, env.log_level(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[list[str]] = None, container: Optional[Container] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    container = container or Container()

    try:
        profile = load_profile(args.profile) if args.profile else {}
        seed = args.url or profile.get("seed")
        if not seed:
            raise ConfigError("a seed URL is required (positional argument or 'seed' in the profile)")
        crawl_config = build_config(
            profile,
            max_depth=args.max_depth,
            common_word_limit=args.common_word_limit,
            follow_offsite=args.follow_offsite,
            min_length=args.min_length,
            min_count=args.min_count,
            user_agent=args.user_agent,
            headers=args.headers,
            common_words_path=args.common_words_path,
        )
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        return EXIT_USAGE

    logger.info("Starting crawl: %s depth=%s offsite=%s", seed, crawl_config.max_depth, crawl_config.follow_offsite)
    executor = container.crawl_executor()
    try:
        result = executor.crawl(seed, crawl_config)
    except InvalidUrlError as e:
        logger.error("%s", e)
        return EXIT_USAGE
    except ResourceError as e:
        logger.error("Cannot load common words: %s", e)
        return EXIT_FAILURE
    except FetchError as e:
        logger.error("Could not fetch seed: %s", e)
        return EXIT_FAILURE
    except PageParseError as e:
        logger.error("Could not parse seed: %s", e)
        return EXIT_FAILURE
    except Exception:
        logger.exception("Unexpected error during crawl of %s", seed)
        return EXIT_FAILURE

    writer = container.report_writer()
    try:
        if args.output:
            writer.write(result.words, args.output)
        else:
            writer.write_stream(result.words, sys.stdout)
    except OSError as e:
        logger.error("Could not write report to %s: %s", args.output or "stdout", e)
        return EXIT_FAILURE
    logger.info("Crawl finished: %s pages, %s words", result.pages_crawled, len(result.words))
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
