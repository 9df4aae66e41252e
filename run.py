"""CLI entry point for the Youdao translation client."""

import argparse
import asyncio
import json
import logging
import sys

from youdao_translate.config import Credentials, load_config, load_credentials
from youdao_translate.errors import ConfigurationError

logger = logging.getLogger("youdao_translate.cli")

DRY_RUN_CREDENTIALS = Credentials(app_id="dry-run-app", app_secret="dry-run-secret")


def _make_translator(args, config):
    from youdao_translate.client import YoudaoTranslator
    from youdao_translate.mock import mock_transport

    if args.dry_run:
        return YoudaoTranslator.from_config(
            config, DRY_RUN_CREDENTIALS, transport=mock_transport()
        )
    return YoudaoTranslator.from_config(config, load_credentials())


def cmd_translate(args):
    config = load_config(args.config)
    translator = _make_translator(args, config)
    result = asyncio.run(translator.translate(args.text, kind=args.kind))
    print(json.dumps(result.to_dict(), ensure_ascii=False))
    return 0 if result.success else 1


def cmd_batch(args):
    from youdao_translate.batch import BatchTranslator
    from youdao_translate.io import RecordWriter

    config = load_config(args.config)
    translator = _make_translator(args, config)
    output = args.output or config.batch.output

    with open(args.input, encoding="utf-8") as f:
        lines = f.readlines()

    with RecordWriter(output) as writer:
        batch = BatchTranslator(translator, concurrency=config.batch.concurrency)
        succeeded, failed = asyncio.run(batch.run(lines, writer, kind=args.kind))

    logger.info(f"Batch complete: {succeeded} succeeded, {failed} failed -> {output}")
    return 0 if failed == 0 else 1


def cmd_status(args):
    from youdao_translate.io import read_records, summarize

    config = load_config(args.config)
    output = args.output or config.batch.output
    summary = summarize(read_records(output))
    print(f"Batch output {output}: {summary['total']} records")
    print(f"Succeeded: {summary['succeeded']}")
    print(f"Failed: {summary['failed']}")
    for message, count in summary["failure_messages"].items():
        print(f"  {count:>5}  {message}")
    return 0


def cmd_sign(args):
    from youdao_translate.signing import build_request

    config = load_config(args.config)
    credentials = load_credentials()
    params = build_request(
        args.text,
        credentials.app_id,
        credentials.app_secret,
        salt=args.salt,
        timestamp=args.timestamp,
        source_lang=config.source_lang,
        target_lang=config.target_lang,
    )
    print(json.dumps(params.to_payload(), ensure_ascii=False, indent=2))
    return 0


def main():
    parser = argparse.ArgumentParser(description="Youdao translation client")
    parser.add_argument("--config", default="config/translator.yaml", help="Config file path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log signing details")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # translate
    translate_parser = subparsers.add_parser("translate", help="Translate a single text")
    translate_parser.add_argument("text", help="Text to translate")
    translate_parser.add_argument("--kind", choices=["word", "text"], default="text")
    translate_parser.add_argument("--dry-run", action="store_true", help="Use the mock endpoint")
    translate_parser.set_defaults(func=cmd_translate)

    # batch
    batch_parser = subparsers.add_parser("batch", help="Translate each line of a file to JSONL")
    batch_parser.add_argument("input", help="Input text file, one text per line")
    batch_parser.add_argument("--output", help="Output JSONL path (default from config)")
    batch_parser.add_argument("--kind", choices=["word", "text"], default="text")
    batch_parser.add_argument("--dry-run", action="store_true", help="Use the mock endpoint")
    batch_parser.set_defaults(func=cmd_batch)

    # sign
    sign_parser = subparsers.add_parser("sign", help="Print the signed request body")
    sign_parser.add_argument("text", help="Text to sign")
    sign_parser.add_argument("--salt", help="Fixed salt (default: random UUID)")
    sign_parser.add_argument("--timestamp", help="Fixed curtime (default: now)")
    sign_parser.set_defaults(func=cmd_sign)

    # status
    status_parser = subparsers.add_parser("status", help="Summarize a batch output file")
    status_parser.add_argument("--output", help="Batch output JSONL path (default from config)")
    status_parser.set_defaults(func=cmd_status)

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    try:
        sys.exit(args.func(args))
    except ConfigurationError as e:
        logger.error(f"{e}. Export them before running.")
        sys.exit(2)


if __name__ == "__main__":
    main()
