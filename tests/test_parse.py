from __future__ import annotations

import pytest

from day16.parse import MAX_NAME, Name, NameMap, ParseError, Valve, parse, parse_line


def test_name_index_round_trip() -> None:
    for i in range(MAX_NAME):
        assert Name.from_index(i).index == i


def test_name_index_bounds() -> None:
    assert Name("AA").index == 0
    assert Name("AZ").index == 25
    assert Name("BA").index == 26
    assert Name("ZZ").index == MAX_NAME - 1


@pytest.mark.parametrize("value", ["A", "AAA", "aa", "A1", ""])
def test_name_rejects_non_uppercase_pairs(value: str) -> None:
    with pytest.raises(ValueError):
        Name(value)


def test_name_map_iterates_in_index_order() -> None:
    names: NameMap[int] = NameMap()
    names.insert(Name("ZZ"), 3)
    names.insert(Name("AB"), 2)
    names.insert(Name("AA"), 1)

    assert list(names.keys()) == [Name("AA"), Name("AB"), Name("ZZ")]
    assert len(names) == 3
    assert names.get(Name("QQ")) is None
    assert Name("AB") in names


def test_name_map_copy_is_independent() -> None:
    original: NameMap[bool] = NameMap()
    original.insert(Name("AA"), True)
    copy = original.copy()
    copy.insert(Name("BB"), True)

    assert not original.contains(Name("BB"))
    assert copy.contains(Name("AA"))
    assert NameMap().is_empty()


def test_parse_plural_tunnels() -> None:
    valve = Valve.parse("Valve AA has flow rate=0; tunnels lead to valves DD, II, BB")
    assert valve == Valve(Name("AA"), 0, (Name("DD"), Name("II"), Name("BB")))


def test_parse_singular_tunnel() -> None:
    valve = parse_line("Valve HH has flow rate=22; tunnel leads to valve GG\n")
    assert valve.name == Name("HH")
    assert valve.flow == 22
    assert valve.links == (Name("GG"),)


@pytest.mark.parametrize(
    "line",
    [
        "Valve AA has flow rate=0",
        "Valve AA; tunnels lead to valves BB",
        "Valve AA has flow rate=; tunnels lead to valves BB",
        "Valve AA has flow rate=-1; tunnels lead to valves BB",
        "Valve AA has flow rate=0; tunnels lead to valves BB trailing",
        "Valve AA has flow rate=0; tunnels lead to valves BB,CC",
        "Valve AA has flow rate=0; tunnels leads to valve BB",
        "Valve aa has flow rate=0; tunnels lead to valves BB",
        " Valve AA has flow rate=0; tunnels lead to valves BB",
        "",
    ],
)
def test_parse_rejects_malformed_lines(line: str) -> None:
    with pytest.raises(ParseError):
        Valve.parse(line)


def test_parse_reports_offending_line() -> None:
    text = "Valve AA has flow rate=0; tunnels lead to valves BB\nValve BB oops\n"
    with pytest.raises(ParseError) as excinfo:
        parse(text)
    assert excinfo.value.line_number == 2
    assert excinfo.value.line == "Valve BB oops"


def test_parse_many_lines() -> None:
    text = (
        "Valve AA has flow rate=0; tunnel leads to valve BB\n"
        "Valve BB has flow rate=3; tunnel leads to valve AA\n"
    )
    valves = parse(text)
    assert [v.name for v in valves] == [Name("AA"), Name("BB")]
    assert [v.flow for v in valves] == [0, 3]
