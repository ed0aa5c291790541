import pytest

from ranges import main
from rangeset.errors import InvalidArgumentError
from rangeset.range import Range
from rangeset.tasks.build import Operation, OperationKind, build_range_set, parse_operations
from rangeset.tasks.evaluate import evaluate
from rangeset.tasks.query import contains, encloses


def test_parse_operations_keeps_order():
    ops = parse_operations([('add', '[1..10]'), ('remove', '(4..6)'), ('add', '5')])
    assert ops == [
        Operation(OperationKind.ADD, Range.closed(1, 10)),
        Operation(OperationKind.REMOVE, Range.open(4, 6)),
        Operation(OperationKind.ADD, Range.singleton(5)),
    ]
    assert str(ops[1]) == "remove (4‥6)"
    assert parse_operations(None) == []


def test_parse_operations_rejects_bad_input():
    with pytest.raises(InvalidArgumentError):
        parse_operations([('add', '[1..')])
    with pytest.raises(ValueError):
        parse_operations([('toggle', '[1..2]')])


def test_build_range_set():
    rs = build_range_set(parse_operations([('add', '[1..10]'), ('remove', '(4..6)'), ('add', '5')]))
    assert str(rs) == "[1‥4][5‥5][6‥10]"


def test_evaluate(capsys):
    evaluate(parse_operations([('add', '[1..3]'), ('add', '[3..5]')]), show_complement=True)
    out = capsys.readouterr().out
    assert "Range set: [1‥5]" in out
    assert "Span: [1‥5]" in out
    assert "Complement: (-∞‥1)(5‥+∞)" in out


def test_evaluate_empty(capsys):
    rs = evaluate([])
    assert rs.is_empty()
    assert "Range set is empty" in capsys.readouterr().out


def test_contains_and_encloses(capsys):
    ops = parse_operations([('add', '[1..2]'), ('add', '[4..5]')])
    assert contains('4.5', ops)
    assert not contains('3', ops)
    assert encloses('[4..5)', ops)
    assert not encloses('[2..4]', ops)
    out = capsys.readouterr().out
    assert "4.5 is covered by [4‥5]" in out
    assert "It lies in the gap (2‥4)" in out
    assert "[4‥5) is enclosed by [4‥5]" in out
    assert "[2‥4] is not enclosed by [1‥2][4‥5]" in out


def test_main_eval(capsys):
    assert main(['eval', '--add', '[1..10]', '--remove', '(4..6)', '--complement']) == 0
    out = capsys.readouterr().out
    assert "Range set: [1‥4][6‥10]" in out
    assert "Complement: (-∞‥1)(4‥6)(10‥+∞)" in out


def test_main_queries(capsys):
    assert main(['contains', '3', '--add', '[1..5]']) == 0
    assert main(['contains', '7', '--add', '[1..5]']) == 1
    assert main(['--check', 'encloses', '[2..3]', '--add', '[1..5]']) == 0


def test_main_reports_errors(capsys):
    assert main(['eval', '--add', '[5..1]']) == 2
    assert "Invalid range" in capsys.readouterr().out
    assert main(['contains', 'abc', '--add', '[1..5]']) == 2


def test_main_without_command(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out
