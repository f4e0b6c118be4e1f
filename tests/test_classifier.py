from __future__ import annotations

import io

import pytest

from fizzbuzz import classifier
from fizzbuzz.classifier import classify, classify_and_emit, fizzbuzz_lines, run


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1, "1"),
        (3, "Fizz"),
        (5, "Buzz"),
        (15, "FizzBuzz"),
        (99, "Fizz"),
        (100, "Buzz"),
    ],
)
def test_classify_known_values(value, expected):
    assert classify(value) == expected


def test_fizzbuzz_lines_follow_divisibility_rules():
    lines = fizzbuzz_lines()

    assert len(lines) == 100
    for value, line in zip(range(1, 101), lines):
        by_three = value % 3 == 0
        by_five = value % 5 == 0
        assert (line == "FizzBuzz") == (by_three and by_five)
        assert (line == "Fizz") == (by_three and not by_five)
        assert (line == "Buzz") == (by_five and not by_three)
        assert (line == str(value)) == (not by_three and not by_five)


def test_classify_uses_supplied_predicates():
    calls: list[tuple[str, int]] = []

    def fake_fizz(value: int) -> bool:
        calls.append(("fizz", value))
        return True

    def fake_buzz(value: int) -> bool:
        calls.append(("buzz", value))
        return False

    assert classify(7, fake_fizz, fake_buzz) == "Fizz"
    assert calls == [("fizz", 7), ("buzz", 7)]


def test_classify_and_emit_writes_one_terminated_line():
    stream = io.StringIO()

    classify_and_emit(15, stream)
    classify_and_emit(16, stream)

    assert stream.getvalue() == "FizzBuzz\n16\n"


def test_classify_and_emit_defaults_to_stdout(capsys):
    classify_and_emit(9)

    assert capsys.readouterr().out == "Fizz\n"


def test_run_emits_range_in_ascending_order():
    stream = io.StringIO()

    run(stream)

    output = stream.getvalue()
    assert output.endswith("\n")
    rows = output.splitlines()
    assert rows == fizzbuzz_lines()
    assert rows[:5] == ["1", "2", "Fizz", "4", "Buzz"]
    assert rows[-1] == "Buzz"
    numeric = [int(row) for row in rows if row.isdigit()]
    assert numeric == sorted(set(numeric))


def test_run_builds_predicates_once(monkeypatch):
    built: list[int] = []
    real_factory = classifier.make_divisibility_predicate

    def counting_factory(divisor: int):
        built.append(divisor)
        return real_factory(divisor)

    monkeypatch.setattr("fizzbuzz.classifier.make_divisibility_predicate", counting_factory)

    run(io.StringIO())

    assert built == [3, 5]
