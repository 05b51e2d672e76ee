from pcoll.outcome import Err, Nothing, Ok, Some, from_optional, get_or_else, map_option


def test_some_and_nothing_equality() -> None:
    assert Some(1) == Some(1)
    assert Some(1) != Some(2)
    assert Nothing() == Nothing()
    assert Some(None) != Nothing()


def test_printed_forms() -> None:
    assert str(Some(42)) == "Some(42)"
    assert str(Nothing()) == "None"


def test_get_or_else() -> None:
    assert get_or_else(Some(5), 0) == 5
    assert get_or_else(Nothing(), 0) == 0


def test_map_option() -> None:
    assert map_option(Some(2), lambda x: x * 10) == Some(20)
    assert map_option(Nothing(), lambda x: x * 10) == Nothing()


def test_from_optional() -> None:
    assert from_optional(3) == Some(3)
    assert from_optional(0) == Some(0)
    assert from_optional(None) == Nothing()


def test_match_on_option() -> None:
    match Some("x"):
        case Some(value):
            assert value == "x"
        case Nothing():
            raise AssertionError("expected Some")


def test_result_variants() -> None:
    ok = Ok(1)
    err = Err(ValueError("bad"))
    assert ok.value == 1
    assert isinstance(err.error, ValueError)
