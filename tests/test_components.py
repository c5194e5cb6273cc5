"""
Unit tests for the individual pipeline stages.

Each stage is a pure function and is tested in isolation here;
tests/test_pipeline.py covers them wired together.

Run: pytest tests/ -v
"""

from __future__ import annotations

import pytest

from kazuyomi.euphony import contract, contract_before_decimal_point
from kazuyomi.exceptions import KazuyomiError, NotNumericStringError
from kazuyomi.groups import read_group, read_integer_part, split_groups
from kazuyomi.literal import read_literal
from kazuyomi.models import LiteralReason, ReadingMode
from kazuyomi.policy import MAX_INTEGER_DIGITS, classify
from kazuyomi.readings import BASIC_READINGS, SPECIAL_READINGS, Sign, Slot, Tier
from kazuyomi.splitter import split_number, split_sign
from kazuyomi.validators import (
    ensure_numeric_string,
    is_numeric_string,
    strip_separators,
)


# ═══════════════════════════════════════════════════════════════════════
# VALIDATOR
# ═══════════════════════════════════════════════════════════════════════


class TestValidator:
    @pytest.mark.parametrize(
        "text", ["0", "-1", "+1", "1,234", "1_000", ".5", "1.", "127.0.0.1", ",", "-."]
    )
    def test_accepts(self, text):
        assert is_numeric_string(text)
        assert ensure_numeric_string(text) == text

    @pytest.mark.parametrize("text", ["", "+", "-", "1-", "+-1", "a", "1 2", "1\n"])
    def test_rejects(self, text):
        assert not is_numeric_string(text)

    def test_empty_input_reason(self):
        with pytest.raises(NotNumericStringError) as exc_info:
            ensure_numeric_string("-")
        assert exc_info.value.details == {"input": "-", "reason": "EMPTY_INPUT"}

    def test_misplaced_sign_reason(self):
        with pytest.raises(NotNumericStringError) as exc_info:
            ensure_numeric_string("1+2")
        assert exc_info.value.details["reason"] == "MISPLACED_SIGN"

    def test_invalid_characters_reason(self):
        with pytest.raises(NotNumericStringError) as exc_info:
            ensure_numeric_string("foobar")
        details = exc_info.value.details
        assert details["reason"] == "INVALID_CHARACTERS"
        assert details["invalid_chars"] == "abfor"

    def test_error_hierarchy(self):
        with pytest.raises(KazuyomiError):
            ensure_numeric_string("*1")


class TestStripSeparators:
    def test_strips_commas_and_underscores(self):
        assert strip_separators("-1,234_567.8_9") == "-1234567.89"

    def test_nothing_to_strip(self):
        assert strip_separators("+12.5") == "+12.5"

    def test_only_separators(self):
        assert strip_separators(",_,") == ""


# ═══════════════════════════════════════════════════════════════════════
# POLICY
# ═══════════════════════════════════════════════════════════════════════


class TestClassify:
    def test_plain_integer_is_structured(self):
        plan = classify("1,234")
        assert plan.mode is ReadingMode.STRUCTURED
        assert plan.reason is None
        assert plan.target == "1234"

    def test_single_zero_is_structured(self):
        assert classify("0").mode is ReadingMode.STRUCTURED
        assert classify("0.5").mode is ReadingMode.STRUCTURED

    def test_multiple_dots_keep_raw_input(self):
        plan = classify("-1,2.3.4")
        assert plan.reason is LiteralReason.MULTIPLE_DOTS
        assert plan.target == "-1,2.3.4"

    def test_leading_zero_after_stripping(self):
        plan = classify("-0_120")
        assert plan.mode is ReadingMode.LITERAL
        assert plan.reason is LiteralReason.LEADING_ZERO
        assert plan.target == "0120"

    def test_digit_limit_boundary(self):
        assert classify("1" * MAX_INTEGER_DIGITS).mode is ReadingMode.STRUCTURED
        plan = classify("1" * (MAX_INTEGER_DIGITS + 1))
        assert plan.reason is LiteralReason.TOO_MANY_DIGITS

    def test_digit_limit_ignores_separators_and_decimals(self):
        text = "_".join(["1111"] * 5) + "." + "2" * 30
        assert classify(text).mode is ReadingMode.STRUCTURED

    def test_multiple_dots_checked_before_leading_zero(self):
        assert classify("01.2.3").reason is LiteralReason.MULTIPLE_DOTS


# ═══════════════════════════════════════════════════════════════════════
# SPLITTER
# ═══════════════════════════════════════════════════════════════════════


class TestSplitter:
    @pytest.mark.parametrize(
        ("text", "sign", "rest"),
        [("-12", Sign.NEGATIVE, "12"), ("+12", Sign.POSITIVE, "12"), ("12", Sign.NONE, "12")],
    )
    def test_split_sign(self, text, sign, rest):
        assert split_sign(text) == (sign, rest)

    def test_integer_only(self):
        parts = split_number("42")
        assert parts.integer_part == "42"
        assert parts.decimal_part is None

    def test_trailing_dot(self):
        parts = split_number("1.")
        assert parts.integer_part == "1"
        assert parts.decimal_part == ""

    def test_leading_dot(self):
        parts = split_number("-.25")
        assert parts.sign is Sign.NEGATIVE
        assert parts.integer_part == ""
        assert parts.decimal_part == "25"

    def test_sign_readings(self):
        assert Sign.NEGATIVE.reading == "マイナス"
        assert Sign.POSITIVE.reading == "プラス"
        assert Sign.NONE.reading == ""


# ═══════════════════════════════════════════════════════════════════════
# GROUP READER
# ═══════════════════════════════════════════════════════════════════════


class TestSlot:
    def test_slot_from_group_length(self):
        assert Slot.for_index(4, 0) is Slot.THOUSANDS
        assert Slot.for_index(4, 3) is Slot.UNITS
        assert Slot.for_index(2, 0) is Slot.TENS
        assert Slot.for_index(1, 0) is Slot.UNITS

    def test_no_special_reading_in_units(self):
        assert all(slot is not Slot.UNITS for _, slot in SPECIAL_READINGS)


class TestSplitGroups:
    def test_groups_from_the_right(self):
        assert split_groups("123456789") == [
            (Tier.OKU, "1"),
            (Tier.MAN, "2345"),
            (Tier.BASE, "6789"),
        ]

    def test_exact_group(self):
        assert split_groups("1234") == [(Tier.BASE, "1234")]

    def test_all_five_tiers(self):
        tiers = [tier for tier, _ in split_groups("1" * 20)]
        assert tiers == [Tier.KEI, Tier.CHO, Tier.OKU, Tier.MAN, Tier.BASE]

    def test_too_many_digits_raises(self):
        with pytest.raises(ValueError, match="Too many digits"):
            split_groups("1" * 21)


class TestReadGroup:
    @pytest.mark.parametrize(
        ("group", "expected"),
        [
            ("1", "イチ"),
            ("10", "ジュウ"),
            ("0001", "イチ"),
            ("0010", "ジュウ"),
            ("0000", ""),
            ("1000", "セン"),
            ("2000", "ニセン"),
            ("3300", "サンゼンサンビャク"),
            ("0600", "ロッピャク"),
            ("8080", "ハッセンハチジュウ"),
            ("9999", "キュウセンキュウヒャクキュウジュウキュウ"),
        ],
    )
    def test_read_group(self, group, expected):
        assert read_group(group) == expected


class TestReadIntegerPart:
    def test_empty(self):
        assert read_integer_part("") == ""

    def test_zero(self):
        assert read_integer_part("0") == "ゼロ"

    def test_elides_zero_groups(self):
        assert read_integer_part("100000000") == "イチオク"

    def test_contracts_before_cho(self):
        assert read_integer_part("1000000000000") == "イッチョウ"

    def test_does_not_contract_base_group(self):
        assert read_integer_part("18") == "ジュウハチ"


# ═══════════════════════════════════════════════════════════════════════
# EUPHONY
# ═══════════════════════════════════════════════════════════════════════


class TestContract:
    @pytest.mark.parametrize(
        ("reading", "expected"),
        [
            ("イチ", "イッ"),
            ("ハチ", "ハッ"),
            ("ジュウ", "ジッ"),
            ("ジュウイチ", "ジュウイッ"),
            ("ハチジュウ", "ハチジッ"),
            ("ニ", "ニ"),
            ("キュウ", "キュウ"),
            ("", ""),
        ],
    )
    def test_contract(self, reading, expected):
        assert contract(reading) == expected

    def test_zero_becomes_rei(self):
        assert contract_before_decimal_point("ゼロ") == "レイ"

    def test_other_readings_contract_normally(self):
        assert contract_before_decimal_point("ジュウ") == "ジッ"
        assert contract_before_decimal_point("") == ""


# ═══════════════════════════════════════════════════════════════════════
# LITERAL READER
# ═══════════════════════════════════════════════════════════════════════


class TestReadLiteral:
    def test_digits_and_dots(self):
        assert read_literal("1.0") == "イチテンゼロ"

    def test_skips_signs_and_separators(self):
        assert read_literal("-1,2_3") == "イチニサン"

    def test_every_mapped_character(self):
        text = "".join(BASIC_READINGS)
        assert read_literal(text) == "".join(BASIC_READINGS.values())
