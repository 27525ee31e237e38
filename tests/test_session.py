import pytest

from taskq.core.errors import ScriptFormatError
from taskq.domain.session import Session, parse_count

SAMPLE_SCRIPT = [
    "7",
    'add "buy bread" #groceries',
    'add "buy milk" #groceries',
    'add "call parents" #relatives',
    "search #groceries",
    "search buy",
    "search a",
    "done 0",
]


def _output(outcomes):
    return [line for o in outcomes for line in o.output]


def test_worked_example():
    session = Session()
    outcomes = session.run_script(SAMPLE_SCRIPT)
    assert all(o.ok for o in outcomes)
    assert _output(outcomes) == [
        "0",
        "1",
        "2",
        "2 item(s) found",
        '1 "buy milk" #groceries',
        '0 "buy bread" #groceries',
        "2 item(s) found",
        '1 "buy milk" #groceries',
        '0 "buy bread" #groceries',
        "2 item(s) found",
        '2 "call parents" #relatives',
        '0 "buy bread" #groceries',
        "done",
    ]
    assert session.store.get(0).completed is True


def test_completed_todos_stay_searchable():
    session = Session()
    session.run_script(SAMPLE_SCRIPT)
    outcome = session.run_line("search a")
    assert outcome.output == [
        "2 item(s) found",
        '2 "call parents" #relatives',
        '0 "buy bread" #groceries',
    ]


def test_unknown_id_does_not_stop_the_session():
    session = Session()
    outcomes = session.run_script(["3", 'add "a"', "done 9", 'add "b"'])
    assert [o.ok for o in outcomes] == [True, False, True]
    assert outcomes[1].error == "Invalid Index"
    assert outcomes[1].error_line == "Error: Invalid Index"
    assert outcomes[1].output == []
    assert outcomes[2].output == ["1"]


def test_malformed_line_is_reported_and_skipped():
    session = Session()
    outcomes = session.run_script(["3", "bogus", 'add "a"', "search"])
    assert outcomes[0].error.startswith("Unknown command")
    assert outcomes[0].line_no == 2
    assert _output(outcomes) == ["0", "1 item(s) found", '0 "a"']


def test_ids_gap_free_across_other_commands():
    session = Session()
    outcomes = session.run_script(
        ["6", 'add "a"', "search a", "done 0", "done 4", 'add "b"', 'add "c"']
    )
    assert [o.output for o in outcomes if o.command.startswith("add")] == [["0"], ["1"], ["2"]]


def test_surplus_lines_are_ignored():
    session = Session()
    outcomes = session.run_script(["1", 'add "a"', 'add "b"'])
    assert len(outcomes) == 1
    assert len(session.store) == 1


def test_missing_lines_end_early():
    session = Session()
    outcomes = session.run_script(["5", 'add "a"'])
    assert len(outcomes) == 1


def test_leading_blank_lines_and_newlines():
    session = Session()
    outcomes = session.run_script(["\n", "2\n", 'add "a b"\n', "search b\n"])
    assert _output(outcomes) == ["0", "1 item(s) found", '0 "a b"']


def test_zero_commands():
    assert Session().run_script(["0", 'add "a"']) == []


@pytest.mark.parametrize("lines", [[], ["", "  "], ["x"], ["-1"], ["2 3"], ["\u00b2"], ["\u00b2", "search"]])
def test_bad_count_line(lines):
    with pytest.raises(ScriptFormatError):
        Session().run_script(lines)


def test_parse_count():
    assert parse_count(" 12 \n") == 12
    with pytest.raises(ScriptFormatError):
        parse_count("1.5")


def _recording(lines, consumed):
    for line in lines:
        consumed.append(line)
        yield line


def test_no_line_is_read_past_the_declared_commands():
    consumed = []
    outcomes = Session().run_script(_recording(["1", 'add "a"', "never read"], consumed))
    assert len(outcomes) == 1
    assert consumed == ["1", 'add "a"']


def test_zero_commands_reads_only_the_count():
    consumed = []
    assert Session().run_script(_recording(["0", 'add "a"'], consumed)) == []
    assert consumed == ["0"]
