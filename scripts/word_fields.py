import re

GLOSS_MAX_CHARS = 220
MAX_EXAMPLES = 3
SYNONYMS_MARKER = "同义词："

PHONETIC_SPAN_RE = re.compile(r'<span class="phonetic">([^<]+)</span>')
TAG_LINE_RE = re.compile(r"^\[.*\]$")
QUOTED_RE = re.compile(r'"([^"]+)"')

# Gloss cursor states
EXPECT_WORD_HEADER = "expect_word_header"
EXPECT_TAG = "expect_tag"
COLLECTING_GLOSS = "collecting_gloss"
DONE = "done"


def _text(value):
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def normalize_newlines(text):
    return _text(text).replace("\r\n", "\n")


def extract_phonetic(item):
    """Phonetic from the BrE/AmE fields, falling back to the span in meaning_html."""
    if item.get("phonetic_br_e"):
        return _text(item["phonetic_br_e"]).strip()
    if item.get("phonetic_am_e"):
        return _text(item["phonetic_am_e"]).strip()
    if item.get("meaning_html"):
        m = PHONETIC_SPAN_RE.search(_text(item["meaning_html"]))
        if m:
            return m.group(1).strip()
    return ""


def gloss_lines(meaning_text):
    lines = (line.strip() for line in normalize_newlines(meaning_text).split("\n"))
    return [line for line in lines if line]


def step_gloss(state, line, word, collected):
    """
    Feed one line to the gloss cursor and return the next state.

    The word header and the bracketed tag are each optional and only
    recognised in their own position; any other line falls through to
    collection. Collection stops before a synonyms line or a line holding a
    quoted example, or right after the line that pushes the joined gloss
    past GLOSS_MAX_CHARS.
    """
    if state == EXPECT_WORD_HEADER:
        if line.lower() == word.lower():
            return EXPECT_TAG
        state = EXPECT_TAG

    if state == EXPECT_TAG:
        if TAG_LINE_RE.match(line):
            return COLLECTING_GLOSS
        state = COLLECTING_GLOSS

    if state == COLLECTING_GLOSS:
        if line.startswith(SYNONYMS_MARKER) or QUOTED_RE.search(line):
            return DONE
        # Callers may feed unfiltered lines
        if line:
            collected.append(line)
        if len(" ".join(collected)) > GLOSS_MAX_CHARS:
            return DONE
        return COLLECTING_GLOSS

    return DONE


def extract_meaning(item):
    """Short gloss: the definition lines after the word header and tag line."""
    if not item.get("meaning_text"):
        return ""

    word = _text(item.get("word")).strip()
    collected = []
    state = EXPECT_WORD_HEADER
    for line in gloss_lines(item["meaning_text"]):
        state = step_gloss(state, line, word, collected)
        if state == DONE:
            break

    return " ".join(collected)


def extract_examples(item):
    """Up to MAX_EXAMPLES double-quoted sentences from meaning_text."""
    examples = []
    if not item.get("meaning_text"):
        return examples

    for line in normalize_newlines(item["meaning_text"]).split("\n"):
        if '"' not in line:
            continue
        for span in QUOTED_RE.findall(line):
            content = span.strip()
            if content and len(examples) < MAX_EXAMPLES:
                examples.append({"en": content, "cn": ""})
        if len(examples) >= MAX_EXAMPLES:
            break

    return examples


def extract_detail(item):
    if not item.get("meaning_text"):
        return ""
    return normalize_newlines(item["meaning_text"]).strip()
