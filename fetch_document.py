"""Fetch rendered documents from the media API and print a short overview.

Usage: python fetch_document.py <doc-uri> [<doc-uri> ...] [--host HOST] [--timeout SEC]

Settings come from the environment or a .env file (MEDIA_HOST, MEDIA_TIMEOUT, ...).
Exit codes: 0 success, 1 transient failure (retry may help), 2 permanent failure.
"""
import argparse
import asyncio
import sys

from media_client import (
    ConfigError,
    MediaClient,
    MediaFetchError,
    MediaSettings,
    build_http_client,
    configure_logging,
    is_permanent,
)

EXIT_OK = 0
EXIT_TRANSIENT = 1
EXIT_PERMANENT = 2


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Fetch rendered TTNINJS documents.")
    parser.add_argument("uris", nargs="+", metavar="doc-uri", help="public document URI")
    parser.add_argument("--host", help="media API host (overrides MEDIA_HOST)")
    parser.add_argument("--timeout", type=float, help="request timeout in seconds (overrides MEDIA_TIMEOUT)")
    return parser.parse_args(argv)


def format_document(doc) -> str:
    lines = [doc.headline or "(no headline)"]
    if doc.uri:
        lines.append(f"  uri: {doc.uri}")
    for key, assoc in sorted(doc.associations.items()):
        lines.append(f"  {key}: {assoc.type or 'unknown'} ({len(assoc.renditions)} renditions)")
    return "\n".join(lines)


async def run(settings: MediaSettings, uris, out=sys.stdout) -> int:
    logger = configure_logging(settings.log_level)
    code = EXIT_OK
    async with build_http_client(settings) as http:
        media = MediaClient.from_settings(settings, client=http, logger=logger)
        for uri in uris:
            try:
                doc = await media.get_rendered_document(uri, None)
            except MediaFetchError as e:
                # a permanent failure outranks transient ones
                if is_permanent(e):
                    code = EXIT_PERMANENT
                elif code == EXIT_OK:
                    code = EXIT_TRANSIENT
                print(f"{uri}: {e}", file=sys.stderr)
                continue
            print(format_document(doc), file=out)
    return code


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        settings = MediaSettings.from_env(host=args.host, timeout_sec=args.timeout)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_PERMANENT
    return asyncio.run(run(settings, args.uris))


if __name__ == "__main__":
    sys.exit(main())
