import numpy as np
import pandas as pd
import suite
from collections import namedtuple
from dgen import from_schema
from minifunk import S, Maybe, enumerable, InvalidArgumentError

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

Player = namedtuple('Player', ['name', 'age', 'club'])

sample_players = [
    Player('totti', 25, 'roma'),
    Player('del piero', 30, 'juventus'),
    Player('maldini', 25, 'milan'),
    Player('zanetti', 35, 'inter'),
]

sample_numbers = [1, 2, 3, 4, 5]


# --- conversion accessor ---

@test("to.list and to.tuple")
def test_to_list_tuple():
    s = S(sample_numbers)
    assert_that(s.to.list() == sample_numbers, "list conversion")
    assert_that(s.to.tuple() == tuple(sample_numbers), "tuple conversion")


@test("to.set removes duplicates")
def test_to_set():
    assert_that(S([1, 2, 2, 3]).to.set() == {1, 2, 3}, "set conversion")


@test("to.dict with key and value selectors")
def test_to_dict():
    by_name = S(sample_players).to.dict(lambda p: p.name)
    assert_that(by_name['totti'] == sample_players[0], "key selector only")
    ages = S(sample_players).to.dict(lambda p: p.name, lambda p: p.age)
    assert_that(ages == {'totti': 25, 'del piero': 30, 'maldini': 25, 'zanetti': 35}, f"ages: {ages}")
    assert_raises(InvalidArgumentError, lambda: S(sample_players).to.dict(None))


@test("to.dict rejects a non-callable value selector before reading")
def test_to_dict_bad_value_selector():
    calls = []
    error = assert_raises(InvalidArgumentError,
                          lambda: S(sample_players).to.dict(lambda p: calls.append(p) or p.name, "age"))
    assert_that("value_selector" in str(error), f"message: {error}")
    assert_that(calls == [], "no key should have been computed")


@test("to.array creates a numpy array")
def test_to_array():
    result = S(sample_numbers).map(lambda x: x * 2).to.array()
    assert_that(isinstance(result, np.ndarray), f"should be ndarray: {type(result)}")
    assert_that(np.array_equal(result, np.array([2, 4, 6, 8, 10])), f"array values: {result}")


@test("to.pandas creates a series")
def test_to_pandas():
    series = S(sample_numbers).to.pandas()
    assert_that(isinstance(series, pd.Series), "should be a series")
    assert_that(series.sum() == 15, "series sum")


@test("to.df creates a dataframe from records")
def test_to_df():
    schema = {
        'name': 'last_name',
        'goals': ('pyint', {'min_value': 0, 'max_value': 40}),
    }
    records = from_schema(schema, seed=21).take(8)
    frame = records.filter(lambda r: r['goals'] >= 0).to.df()
    assert_that(isinstance(frame, pd.DataFrame), "should be a dataframe")
    assert_that(list(frame.columns) == ['name', 'goals'], f"columns: {list(frame.columns)}")
    assert_that(len(frame) == 8, "one row per record")


@test("to.join renders elements with str")
def test_to_join():
    assert_that(S([1, None, 'a']).to.join() == "1, None, a", "default separator")
    assert_that(enumerable(['a', 'b']).to.join("-") == "a-b", "custom separator")


@test("conversions return fresh containers")
def test_conversions_are_copies():
    s = S([3, 1])
    s.to.list().append(7)
    assert_that(s.count() == 2, "stream should be unchanged")


# --- maybe ---

@test("maybe presence and unwrapping")
def test_maybe_basics():
    present = Maybe.of(5)
    absent = Maybe.empty()
    assert_that(present.is_present and not present.is_empty, "of() is present")
    assert_that(absent.is_empty and not absent.is_present, "empty() is absent")
    assert_that(present.get() == 5, "get unwraps")
    assert_that(bool(present) and not bool(absent), "truthiness follows presence")
    assert_raises(ValueError, absent.get, "get on empty")


@test("maybe holding falsy values is still present")
def test_maybe_falsy():
    assert_that(Maybe.of(None).is_present, "None value")
    assert_that(bool(Maybe.of(0)), "zero value is truthy as a maybe")
    assert_that(Maybe.of(None) != Maybe.empty(), "present None is not absent")


@test("maybe or_else, map and if_present")
def test_maybe_helpers():
    assert_that(Maybe.empty().or_else(1) == 1, "or_else default")
    assert_that(Maybe.of(2).or_else(1) == 2, "or_else value")
    assert_that(Maybe.of(2).map(lambda x: x * 10) == Maybe.of(20), "map present")
    assert_that(Maybe.empty().map(lambda x: x * 10).is_empty, "map absent")
    seen = []
    Maybe.of('x').if_present(seen.append)
    Maybe.empty().if_present(seen.append)
    assert_that(seen == ['x'], f"if_present calls: {seen}")


@test("maybe map and if_present reject missing functions")
def test_maybe_guards():
    for maybe in (Maybe.of(1), Maybe.empty()):
        assert_raises(InvalidArgumentError, lambda: maybe.map(None), f"map None on {maybe!r}")
        assert_raises(InvalidArgumentError, lambda: maybe.if_present(None), f"if_present None on {maybe!r}")


@test("maybe repr")
def test_maybe_repr():
    assert_that(repr(Maybe.of('a')) == "Maybe.of('a')", repr(Maybe.of('a')))
    assert_that(repr(Maybe.empty()) == "Maybe.empty()", repr(Maybe.empty()))


@test("find_first result chains into maybe map")
def test_find_then_map():
    name = (S(sample_players)
            .find_first(lambda p: p.club == 'inter')
            .map(lambda p: p.name)
            .or_else('nobody'))
    assert_that(name == 'zanetti', f"found: {name}")


if __name__ == "__main__":
    suite.run(title="minifunk terminal and maybe test suite")
