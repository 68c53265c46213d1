import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from stdkit.exceptions import InvalidInputError
from stdkit.utils.case_convert import (
    CaseConverter,
    camel_case,
    name_change,
    nl2br,
    title_case,
    to_camel_case,
    to_lower,
    to_snake_case,
    to_upper,
    upper_first,
)


def test_lower_upper_unicode():
    assert to_lower("ÄÖÜ Straße") == "äöü straße"
    assert to_upper("straße") == "STRASSE"


def test_lower_idempotent():
    for s in ["Hello World", "ÉCOLE", "mIxEd_Case-123", ""]:
        assert to_lower(to_lower(s)) == to_lower(s)


def test_upper_first():
    assert upper_first("hello world") == "Hello world"
    assert upper_first("éclair") == "Éclair"
    assert upper_first("hELLO") == "HELLO"
    assert upper_first("") == ""
    for s in ["abc", "Abc", "ñandú"]:
        assert upper_first(upper_first(s)) == upper_first(s)


def test_title_case():
    assert title_case("hello WORLD") == "Hello World"
    assert title_case("it's  a\tnew day") == "It's  A\tNew Day"
    assert title_case("") == ""


def test_to_camel_case():
    assert to_camel_case("first_name") == "firstName"
    assert to_camel_case("first_name", True) == "FirstName"
    assert to_camel_case("first__last_name") == "firstLastName"
    assert to_camel_case("FIRST_NAME") == "firstName"
    assert to_camel_case("_first_name") == "FirstName"
    assert to_camel_case("name_1") == "name_1"
    assert to_camel_case("trailing_") == "trailing_"


def test_camel_case():
    assert camel_case("first-second") == "firstSecond"
    assert camel_case("-first-second-", True) == "FirstSecond"
    assert camel_case("first-sECOND-third") == "firstSECONDThird"
    assert camel_case("_first_second_") == "first_second"
    assert camel_case("first") == "first"
    assert camel_case("first", True) == "First"


def test_to_snake_case():
    assert to_snake_case("CMSCategories") == "cms_categories"
    assert to_snake_case("RangePrice") == "range_price"
    assert to_snake_case("rangePrice") == "range_price"
    assert to_snake_case("RangePrice", "-") == "range-price"
    assert to_snake_case("already_snake") == "already_snake"


def test_name_change():
    assert name_change("first_name") == "firstName"
    assert name_change("  first_name  ") == "firstName"
    assert name_change("FIRST_NAME") == "firstName"
    assert name_change("firstName") == "firstName"
    assert name_change("firstName", False) == "first_name"
    assert name_change("firstLastName", False) == "first_last_name"


def test_snake_rules_diverge_on_capital_runs():
    assert to_snake_case("firstName") == name_change("firstName", False) == "first_name"
    assert to_snake_case("ABCName") == "abc_name"
    assert name_change("ABCName", False) == "abcname"


def test_nl2br():
    assert nl2br("a\r\nb\rc\nd") == "a<br />b<br />c<br />d"
    assert nl2br("a\n\r\nb") == "a<br /><br />b"
    assert nl2br("no newline") == "no newline"


def test_non_str_input_rejected():
    for fn in [to_lower, to_upper, upper_first, title_case, to_camel_case, camel_case, to_snake_case, name_change,
               nl2br]:
        try:
            fn(123)
            assert False, f"{fn.__name__} should raise InvalidInputError"
        except InvalidInputError as e:
            assert "int" in str(e)
            assert isinstance(e, TypeError)


def test_case_converter_aliases():
    assert CaseConverter.camel("first_name") == "firstName"
    assert CaseConverter.to_camel("first_name", True) == "FirstName"
    assert CaseConverter.snake("RangePrice") == "range_price"
    assert CaseConverter.ucwords("hello world") == "Hello World"
    assert CaseConverter.ucfirst("abc") == "Abc"
    assert CaseConverter.strtolower("ABC") == "abc"
    assert CaseConverter.upper("abc") == "ABC"


if __name__ == "__main__":
    test_lower_upper_unicode()
    test_lower_idempotent()
    test_upper_first()
    test_title_case()
    test_to_camel_case()
    test_camel_case()
    test_to_snake_case()
    test_name_change()
    test_snake_rules_diverge_on_capital_runs()
    test_nl2br()
    test_non_str_input_rejected()
    test_case_converter_aliases()
    print("All tests passed!")
