import pytest

from word_output import MODULE_HEADER, render_json, render_module, write_outputs


WORDS = [{"id": "cet4_00001", "word": "café", "examples": []}]


def test_render_json_two_space_indent_and_raw_unicode():
    text = render_json(WORDS)
    assert text.startswith('[\n  {\n    "id": "cet4_00001",')
    assert '"café"' in text
    assert '"examples": []' in text
    assert not text.endswith("\n")


def test_render_json_empty_list():
    assert render_json([]) == "[]"


def test_render_module_wraps_given_text():
    module = render_module("[1, 2]")
    assert module == MODULE_HEADER + "\nconst words = [1, 2];\n\nexport default words;\n"


def test_write_outputs_replaces_existing_files(tmp_path):
    json_path = tmp_path / "words.json"
    js_path = tmp_path / "words.js"
    json_path.write_text("stale", encoding="utf-8")

    write_outputs(WORDS, json_path, js_path)

    assert json_path.read_text(encoding="utf-8") == render_json(WORDS)
    assert js_path.read_text(encoding="utf-8") == render_module(render_json(WORDS))


def test_render_json_escapes_lone_surrogates():
    text = render_json([{"word": "x\ud800y"}])
    assert '"x\\ud800y"' in text
    text.encode("utf-8")


def test_write_outputs_failure_leaves_nothing_behind(tmp_path):
    json_path = tmp_path / "words.json"
    json_path.write_text("previous run", encoding="utf-8")
    js_path = tmp_path / "missing_dir" / "words.js"

    with pytest.raises(OSError):
        write_outputs(WORDS, json_path, js_path)

    assert json_path.read_text(encoding="utf-8") == "previous run"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["words.json"]
