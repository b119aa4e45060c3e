from timers.parser import ADD_USAGE, CANCEL_USAGE, UNKNOWN_COMMAND, parse_command


def test_parse_add_minutes_with_label():
    result = parse_command("add 15 чай заварить")
    assert result
    assert result.action == "add"
    assert result.duration_seconds == 15 * 60
    assert result.label == "чай заварить"


def test_parse_add_without_label():
    result = parse_command("add 3")
    assert result.action == "add"
    assert result.label == ""


def test_parse_add_unit_suffixes():
    assert parse_command("add 90s tea").duration_seconds == 90
    assert parse_command("add 2m tea").duration_seconds == 120
    assert parse_command("add 1h tea").duration_seconds == 3600


def test_parse_add_respects_unit_seconds():
    result = parse_command("add 2 quick", unit_seconds=1.0)
    assert result.duration_seconds == 2.0


def test_parse_add_rejects_bad_amounts():
    for line in ("add", "add 0 x", "add -3 x", "add ten x", "add 5x label"):
        result = parse_command(line)
        assert result.action == "invalid", line
        assert result.error == ADD_USAGE


def test_parse_pomodoro_label():
    result = parse_command("pomodoro  отчёт ")
    assert result.action == "pomodoro"
    assert result.label == "отчёт"


def test_parse_cancel():
    result = parse_command("cancel 7")
    assert result.action == "cancel"
    assert result.timer_id == 7


def test_parse_cancel_requires_number():
    result = parse_command("cancel first")
    assert result.action == "invalid"
    assert result.error == CANCEL_USAGE


def test_parse_aliases_and_case():
    assert parse_command("QUIT").action == "exit"
    assert parse_command("?").action == "help"
    assert parse_command("List").action == "list"


def test_parse_blank_and_unknown():
    assert parse_command("   ") is None
    result = parse_command("launch rockets")
    assert result.action == "unknown"
    assert result.error == UNKNOWN_COMMAND


def test_parse_add_suffixes_ignore_unit_seconds():
    assert parse_command("add 2m x", unit_seconds=1.0).duration_seconds == 120
    assert parse_command("add 1h x", unit_seconds=1.0).duration_seconds == 3600
    assert parse_command("add 45s x", unit_seconds=1.0).duration_seconds == 45
    assert parse_command("add 3 x", unit_seconds=1.0).duration_seconds == 3
