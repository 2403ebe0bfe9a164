import pytest

from appopts import App, ParserSettings
from appopts.exceptions import ArgumentRequiredError, UnknownOptionError
from appopts.parser import ArgvParser, BoolCell, IntCell, OptionType, StrCell


def build_app(**kwargs):
    errors = []

    def on_error(app, token):
        errors.append((token, type(app.last_error)))

    app = App(on_error=on_error, **kwargs)
    return app, errors


def test_parses_all_types():
    app, errors = build_app()
    verbose, count, name = BoolCell(), IntCell(), StrCell()
    app.add("v", "verbose", OptionType.FLAG, verbose)
    app.add("c", "count", OptionType.INT, count)
    app.add("n", "name", OptionType.STRING, name)

    assert app.parse_args(["/usr/bin/prog", "-v", "--count", "3", "-n", "Alice"])
    assert verbose.value is True
    assert count.value == 3
    assert name.value == "Alice"
    assert errors == []


def test_program_name_is_argv0_basename():
    app, _ = build_app()
    assert app.parse_args(["/usr/local/bin/server"])
    assert app.program_name == "server"


def test_skips_non_option_tokens():
    app, errors = build_app()
    debug = BoolCell()
    app.add("d", "debug", OptionType.FLAG, debug)
    assert app.parse_args(["prog", "input.txt", "-d", "output.txt"])
    assert debug.value is True
    assert errors == []


def test_last_write_wins():
    app, _ = build_app()
    level = IntCell()
    app.add("l", "level", OptionType.INT, level)
    assert app.parse_args(["prog", "-l", "1", "--level", "2", "-l", "5"])
    assert level.value == 5


def test_value_token_is_consumed_unconditionally():
    app, _ = build_app()
    name, debug = StrCell(), BoolCell()
    app.add("n", "name", OptionType.STRING, name)
    app.add("d", "debug", OptionType.FLAG, debug)
    assert app.parse_args(["prog", "--name", "-d"])
    assert name.value == "-d"
    assert debug.value is False


def test_short_token_with_attached_value_is_unknown():
    app, errors = build_app()
    app.add("x", None, OptionType.STRING, StrCell())
    assert not app.parse_args(["prog", "-xVALUE"])
    assert errors == [("-xVALUE", UnknownOptionError)]


def test_long_prefix_is_unknown():
    app, errors = build_app()
    app.add(None, "foo", OptionType.FLAG, BoolCell())
    assert not app.parse_args(["prog", "--foobar"])
    assert errors == [("--foobar", UnknownOptionError)]


def test_unknown_option_aborts_without_touching_later_bindings():
    app, errors = build_app()
    first, later = BoolCell(), StrCell("unchanged")
    app.add("a", None, OptionType.FLAG, first)
    app.add("n", "name", OptionType.STRING, later)
    assert not app.parse_args(["prog", "-a", "-z", "--name", "changed"])
    assert first.value is True
    assert later.value == "unchanged"
    assert errors == [("-z", UnknownOptionError)]


@pytest.mark.parametrize(
    "option_type,cell",
    [
        (OptionType.INT, IntCell()),
        (OptionType.STRING, StrCell()),
        (OptionType.SECRET, StrCell()),
    ],
)
def test_missing_value_is_argument_required(option_type, cell):
    app, errors = build_app()
    app.add("o", "opt", option_type, cell)
    assert not app.parse_args(["prog", "--opt"])
    assert errors == [("--opt", ArgumentRequiredError)]


def test_secret_is_wiped_from_argv():
    app, _ = build_app()
    password = StrCell()
    app.add("p", "password", OptionType.SECRET, password)
    argv = ["prog", "--password", "secret123"]
    assert app.parse_args(argv)
    assert password.value == "secret123"
    assert "secret123" not in argv
    assert argv[2] == "\x00" * len("secret123")


def test_secret_bytearray_wiped_in_place():
    app, _ = build_app()
    password = StrCell()
    app.add("p", "password", OptionType.SECRET, password)
    secret = bytearray(b"hunter2")
    assert app.parse_args(["prog", "-p", secret])
    assert password.value == "hunter2"
    assert secret == bytearray(7)


def test_secret_kept_when_wiping_disabled():
    app, _ = build_app(settings=ParserSettings(wipe_secrets=False))
    password = StrCell()
    app.add("p", "password", OptionType.SECRET, password)
    argv = ["prog", "-p", "secret123"]
    assert app.parse_args(argv)
    assert argv[2] == "secret123"


def test_string_is_not_wiped():
    app, _ = build_app()
    name = StrCell()
    app.add("n", "name", OptionType.STRING, name)
    argv = ["prog", "-n", "Alice"]
    assert app.parse_args(argv)
    assert argv[2] == "Alice"


def test_callback_receives_app_and_token():
    app, _ = build_app()
    calls = []
    app.add("V", "version", OptionType.CALLBACK, lambda a, token: calls.append((a, token)))
    assert app.parse_args(["prog", "-V", "--version"])
    assert calls == [(app, "-V"), (app, "--version")]


def test_integer_is_permissive_by_default():
    app, errors = build_app()
    count = IntCell(9)
    app.add("c", "count", OptionType.INT, count)
    assert app.parse_args(["prog", "-c", "many"])
    assert count.value == 0
    assert errors == []


def test_strict_integers_reports_bad_value():
    app, errors = build_app(settings=ParserSettings(strict_integers=True))
    count = IntCell(9)
    app.add("c", "count", OptionType.INT, count)
    assert not app.parse_args(["prog", "-c", "many"])
    assert count.value == 9
    assert len(errors) == 1
    assert errors[0][0] == "-c"


def test_empty_argv_is_success():
    app, errors = build_app(program_name="fixed")
    assert app.parse_args([])
    assert app.program_name == "fixed"
    assert errors == []


def test_argv_must_be_mutable():
    app, _ = build_app()
    with pytest.raises(TypeError):
        ArgvParser(app).parse(("prog", "-v"))


def test_defaults_to_sys_argv(monkeypatch):
    app, _ = build_app()
    debug = BoolCell()
    app.add("d", None, OptionType.FLAG, debug)
    monkeypatch.setattr("sys.argv", ["/opt/tool", "-d"])
    assert app.parse_args()
    assert debug.value is True
    assert app.program_name == "tool"


def test_strict_integer_message_names_the_option():
    app, _ = build_app(settings=ParserSettings(strict_integers=True))
    app.add("c", "count", OptionType.INT, IntCell())
    assert not app.parse_args(["prog", "-c", "many"])
    assert app.last_error.message == "ERROR: Bad value 'many' for option '-c'"
