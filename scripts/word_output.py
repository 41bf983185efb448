import json
import logging
import os
import re
from pathlib import Path

logger = logging.getLogger(__name__)

MODULE_HEADER = "// Auto-generated, do not edit by hand. Source: scripts/build_words.py"
MODULE_BINDING = "words"

# The only export point of the generated module is the default export.
MODULE_TEMPLATE = (
    "{header}\n"
    "const {binding} = {payload};\n"
    "\n"
    "export default {binding};\n"
)

# json.loads pairs valid surrogates, so any left in a str are lone ones
LONE_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def render_json(words):
    text = json.dumps(words, ensure_ascii=False, indent=2)
    return LONE_SURROGATE_RE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)


def render_module(json_text):
    """Wrap already-serialized JSON into an ES module with a default export."""
    return MODULE_TEMPLATE.format(
        header=MODULE_HEADER, binding=MODULE_BINDING, payload=json_text
    )


def write_outputs(words, json_path, js_path):
    """
    Write the JSON and module artifacts, both or neither.

    Both are rendered and encoded up front, staged next to their targets and
    only moved into place once every staged file is complete.
    """
    json_text = render_json(words)
    payloads = [
        (Path(json_path), json_text.encode("utf-8")),
        (Path(js_path), render_module(json_text).encode("utf-8")),
    ]

    staged = []
    try:
        for path, data in payloads:
            tmp = path.with_name(path.name + ".tmp")
            staged.append((tmp, path))
            tmp.write_bytes(data)
    except OSError:
        for tmp, _ in staged:
            tmp.unlink(missing_ok=True)
        raise

    for tmp, path in staged:
        os.replace(tmp, path)
    logger.debug(f"Wrote {len(json_text)} chars to {staged[0][1]} and {staged[1][1]}")
    return staged[0][1], staged[1][1]
