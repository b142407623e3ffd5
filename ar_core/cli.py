from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from pathlib import Path
from typing import Optional, Sequence

from .annotations import deserialize_annotation_list, ingest_document, serialize_annotation_list
from .annotations.utils import format_duration_colon, parse_duration_colon, parse_duration_letters
from .config import AppConfig
from .errors import FormatError, ValidationError
from .playback import VisibilityEngine

logger = logging.getLogger(__name__)

# Command-line times are strict, unlike URL fragments
_LETTERS_ARG = re.compile(r"(?:\d+h)?(?:\d+m)?(?:\d+s)?")


def _parse_time(value: str) -> float:
    try:
        seconds = parse_duration_colon(value)
    except FormatError:
        if not value or not _LETTERS_ARG.fullmatch(value):
            raise argparse.ArgumentTypeError(f"invalid time {value!r} (use 1:23, 83 or 1m23s)") from None
        seconds = float(parse_duration_letters(value))
    if seconds < 0:
        raise argparse.ArgumentTypeError(f"time must not be negative: {value!r}")
    return seconds


def _read_ar(path: Path) -> str:
    # Editors like to append a newline; the format itself ends in ';'
    return path.read_text(encoding="utf-8").strip()


def _cmd_convert(args, settings) -> int:
    annotations = ingest_document(args.xml_file.read_bytes(), trusted_prefix=settings.trusted_url_prefix)
    text = serialize_annotation_list(annotations, required=settings.required_fields)
    if args.output:
        args.output.write_text(text, encoding="utf-8")
        logger.info("Wrote %d annotations to %s", len(annotations), args.output)
    else:
        print(text)
    return 0


def _cmd_decode(args, settings) -> int:
    annotations = deserialize_annotation_list(_read_ar(args.ar_file))
    print(json.dumps([a.to_dict() for a in annotations], indent=2, ensure_ascii=False))
    return 0


def _cmd_visible(args, settings) -> int:
    engine = VisibilityEngine(deserialize_annotation_list(_read_ar(args.ar_file)))
    engine.update(args.at)
    visible = engine.visible_ids()
    print(f"{len(visible)} of {len(engine)} annotations visible at {format_duration_colon(args.at)}")
    for ann_id in visible:
        annotation = engine.annotation(ann_id)
        print(f"  [{ann_id}] {annotation.type or '-'}: {annotation.text or ''}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ar-annotations", description="Legacy annotation converter and visibility checker")
    p.add_argument("--config", type=Path, help="JSON settings file")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    convert = sub.add_parser("convert", help="legacy annotation XML -> AR text")
    convert.add_argument("xml_file", type=Path)
    convert.add_argument("-o", "--output", type=Path)
    convert.set_defaults(func=_cmd_convert)

    decode = sub.add_parser("decode", help="AR text -> JSON")
    decode.add_argument("ar_file", type=Path)
    decode.set_defaults(func=_cmd_decode)

    visible = sub.add_parser("visible", help="list annotations visible at a playback time")
    visible.add_argument("ar_file", type=Path)
    visible.add_argument("--at", type=_parse_time, required=True)
    visible.set_defaults(func=_cmd_visible)
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = AppConfig(args.config).to_settings()

    level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(level=level, format="[%(asctime)s] %(levelname)s %(name)s: %(message)s", datefmt="%H:%M:%S")

    try:
        return args.func(args, settings)
    except (FormatError, ValidationError, OSError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
