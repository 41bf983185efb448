"""
Convert the scraped cet4_core_words.json into the word-list format used by
the mini-program.

Outputs, next to this script:
    cet4_words_built.json   plain JSON, for inspection
    cet4_words_built.js     ES module with the same array as default export

Usage:
    python scripts/build_words.py
"""

import json
import logging
import os
import sys
from pathlib import Path

from word_fields import (
    extract_detail,
    extract_examples,
    extract_meaning,
    extract_phonetic,
)
from word_output import write_outputs

logger = logging.getLogger(__name__)

HERE = Path(__file__).resolve().parent
SRC_PATH = HERE / "cet4_core_words.json"
OUT_JSON_PATH = HERE / "cet4_words_built.json"
OUT_JS_PATH = HERE / "cet4_words_built.js"

ID_PREFIX = "cet4_"
ID_WIDTH = 5


class SourceFormatError(ValueError):
    """Parsed source data is not a list of records."""


def make_id(index):
    # Numbered by position in the source file, so skipped entries leave gaps
    return f"{ID_PREFIX}{index + 1:0{ID_WIDTH}d}"


def load_source(path):
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Source file not found: {path}")

    raw_data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw_data, list):
        raise SourceFormatError(f"Source data in {path} is not a JSON array")
    return raw_data


def build_entry(item, index):
    """Normalize one scraped record, or return None when it has nothing usable."""
    if not isinstance(item, dict) or not item.get("word"):
        return None

    word = str(item["word"]).strip()
    if not word:
        return None

    meaning = extract_meaning(item)
    detail = extract_detail(item)
    # Entries without any definition (Wikipedia stubs etc.) are dropped
    if not meaning and not detail:
        return None

    return {
        "id": make_id(index),
        "word": word,
        "phonetic": extract_phonetic(item),
        "meaning": meaning,
        "detail": detail,
        "examples": extract_examples(item),
        "audioBrUrl": item.get("audio_br_url") or "",
        "audioAmUrl": item.get("audio_am_url") or "",
        "sourceUrl": item.get("detail_url") or "",
    }


def build_words(raw_data):
    if not isinstance(raw_data, list):
        raise SourceFormatError("Source data is not a list of records")

    built = []
    for index, item in enumerate(raw_data):
        entry = build_entry(item, index)
        if entry is not None:
            built.append(entry)
    return built


def build(src_path=SRC_PATH, out_json_path=OUT_JSON_PATH, out_js_path=OUT_JS_PATH):
    raw_data = load_source(src_path)
    built = build_words(raw_data)
    json_path, js_path = write_outputs(built, out_json_path, out_js_path)

    logger.info(f"Processed {len(raw_data)} records, kept {len(built)} word entries.")
    logger.info(f"Generated: {os.path.relpath(json_path, Path.cwd())}")
    logger.info(f"Generated: {os.path.relpath(js_path, Path.cwd())}")
    return built


def main():
    logging.basicConfig(level=logging.INFO)
    try:
        build(SRC_PATH, OUT_JSON_PATH, OUT_JS_PATH)
    except FileNotFoundError as e:
        logger.error(f"Cannot find the source file: {e}")
        sys.exit(1)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"Failed to parse {SRC_PATH.name}: {e}")
        sys.exit(1)
    except SourceFormatError as e:
        logger.error(f"Source data is not an array, check {SRC_PATH.name}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
