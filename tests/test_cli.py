import io
import json
import sys
import tempfile
from contextlib import redirect_stdout
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from stdkit.cli import main, split_args
from stdkit.context import C


def run(*argv: str) -> tuple[int, str]:
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        code = main(list(argv))
    return code, buffer.getvalue().strip()


def test_split_args():
    config_args, params = split_args(["action=case", "--json.depth=3", "config=a.yaml", "text=a=b", "junk"])
    assert config_args == ["json.depth=3", "config=a.yaml"]
    assert params == {"action": "case", "text": "a=b"}


def test_case_action():
    assert run("action=case", "to=snake", "text=RangePrice") == (0, "range_price")
    assert run("action=case", "to=snake", "sep=-", "text=RangePrice") == (0, "range-price")
    assert run("action=case", "to=camel", "upper_first=true", "text=first_name") == (0, "FirstName")
    assert run("action=case", "to=camel_case", "text=first-second") == (0, "firstSecond")
    assert run("action=case", "to=name_change", "to_camel=false", "text=firstName") == (0, "first_name")
    assert run("action=case", "to=title", "text=hello world") == (0, "Hello World")


def test_parse_action():
    with tempfile.TemporaryDirectory() as tmp_dir:
        path = Path(tmp_dir) / "conf.jsonc"
        path.write_text('{"a": 1, /* note */ "b": "http://x"} // end', encoding="utf-8")

        code, out = run("action=parse", f"input={path}")
        assert code == 0
        assert json.loads(out) == {"a": 1, "b": "http://x"}


def test_format_action():
    with tempfile.TemporaryDirectory() as tmp_dir:
        path = Path(tmp_dir) / "conf.json"
        path.write_text('{\n  "a": 1 // one\n}\n', encoding="utf-8")

        code, out = run("action=format", f"input={path}", "output=true", "type=min")
        assert code == 0
        assert "// one" not in out
        assert (Path(tmp_dir) / "conf.min.json").read_text(encoding="utf-8") == '{"a":1}'


def test_errors_exit_non_zero():
    assert run("action=unknown")[0] == 1
    assert run("action=case", "to=kebab", "text=x")[0] == 1
    assert run("action=parse", "input={broken")[0] == 1
    assert run("action=case", "text=x", "config=/no/such/stdkit.yaml")[0] == 1


def test_config_override_is_applied():
    code, _ = run("action=case", "text=x", "json.depth=7")
    assert code == 0
    assert C.config.json_config.depth == 7
    run("action=case", "text=x")
    assert C.config.json_config.depth == 512


if __name__ == "__main__":
    test_split_args()
    test_case_action()
    test_parse_action()
    test_format_action()
    test_errors_exit_non_zero()
    test_config_override_is_applied()
    print("All tests passed!")
