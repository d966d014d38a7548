from pathlib import Path

import pytest
import yaml

from karma_systemjs import ConfigFileError, load_config_file, parse_config_text


def test_loads_system_config_script(fixtures_dir: Path) -> None:
    loaded = load_config_file(fixtures_dir / "system.conf.js")
    assert loaded == {
        "transpiler": "babel",
        "paths": {
            "npm:*": "jspm_packages/npm/*",
            "github:*": "jspm_packages/github/*",
        },
        "map": {"app": "src/app"},
    }


def test_loads_yaml_document(fixtures_dir: Path) -> None:
    loaded = load_config_file(str(fixtures_dir / "system.conf.yaml"))
    assert loaded["transpiler"] == "typescript"
    assert loaded["paths"] == {"typescript": "vendor/typescript.js"}


def test_loads_primitive_value(fixtures_dir: Path) -> None:
    assert load_config_file(fixtures_dir / "primitive.json") == 42


def test_empty_file_yields_none(tmp_path: Path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config_file(path) is None


def test_json_document(tmp_path: Path) -> None:
    path = tmp_path / "system.json"
    path.write_text('{"transpiler": null, "paths": {"systemjs": "s.js"}}', encoding="utf-8")
    assert load_config_file(path) == {"transpiler": None, "paths": {"systemjs": "s.js"}}


def test_successive_calls_are_deep_merged() -> None:
    text = """
    System.config({ paths: { systemjs: 'a.js' }, transpiler: "traceur" });
    System.config({paths:{'es6-module-loader':'b.js'}, transpiler: null});
    """
    assert parse_config_text(text) == {
        "paths": {"systemjs": "a.js", "es6-module-loader": "b.js"},
        "transpiler": None,
    }


def test_comments_and_strings_are_respected() -> None:
    text = """
    System.config({
      /* loader paths */
      paths: {
        'cdn:*': 'https://cdn.example.com/*', // remote
      },
      meta: { 'legacy.js': { format: 'global' } }
    });
    """
    assert parse_config_text(text) == {
        "paths": {"cdn:*": "https://cdn.example.com/*"},
        "meta": {"legacy.js": {"format": "global"}},
    }


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigFileError) as excinfo:
        load_config_file(tmp_path / "nope.js")
    assert excinfo.value.reason == "config_file_unreadable"
    assert isinstance(excinfo.value.__cause__, OSError)


@pytest.mark.parametrize("name", ["malformed.yaml", "unbalanced.conf.js"])
def test_malformed_file_raises(fixtures_dir: Path, name: str) -> None:
    with pytest.raises(ConfigFileError) as excinfo:
        load_config_file(fixtures_dir / name)
    assert excinfo.value.reason == "config_file_malformed"
    assert isinstance(excinfo.value.__cause__, yaml.YAMLError)
    assert name in str(excinfo.value)


@pytest.mark.parametrize(
    "text,expected",
    [
        (r"System.config({ a: 'it\'s' });", "it's"),
        (r"System.config({ a: '\\d' });", "\\d"),
        (r"System.config({ a: 'x\ny' });", "x\ny"),
        (r'System.config({ a: "it\'s \"ok\"" });', 'it\'s "ok"'),
        (r'System.config({ a: "C:\\dir\nnext" });', "C:\\dir\nnext"),
        (r'System.config({ a: `say "hi"\n` });', 'say "hi"\n'),
        (r"System.config({ a: `\\d\`` });", "\\d`"),
        (r"System.config({ a: '\u00e9\x41\u{1F600}' });", "\u00e9A\U0001F600"),
    ],
    ids=[
        "single-escaped-quote",
        "single-backslash",
        "single-newline",
        "double-quotes",
        "double-backslash-newline",
        "backtick-double-quote",
        "backtick-backslash",
        "unicode-escapes",
    ],
)
def test_string_escapes_follow_javascript(text: str, expected: str) -> None:
    assert parse_config_text(text) == {"a": expected}


def test_calls_in_comments_and_strings_are_ignored() -> None:
    text = """
    // System.config(cfg)
    var note = "System.config(ignored)";
    mySystem.config({ transpiler: 'traceur' });
    window.System.config({ transpiler: 'babel' });
    /* System.config({ transpiler: 'typescript' }) */
    """
    assert parse_config_text(text) == {"transpiler": "babel"}


def test_apostrophe_in_yaml_document(tmp_path: Path) -> None:
    path = tmp_path / "system.yaml"
    path.write_text("# don't edit by hand\ntranspiler: babel\n", encoding="utf-8")
    assert load_config_file(path) == {"transpiler": "babel"}


def test_invalid_utf8_raises(tmp_path: Path) -> None:
    path = tmp_path / "system.conf.js"
    path.write_bytes(b"\xff\xfe System.config({})")
    with pytest.raises(ConfigFileError) as excinfo:
        load_config_file(path)
    assert excinfo.value.reason == "config_file_malformed"
    assert excinfo.value.path == path
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
