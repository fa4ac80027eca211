"""
Тесты для BigInteger — знаковое целое произвольной точности

Проверяемые инварианты:
1. Конструирование из int / str / bytes / BigInteger
2. Арифметика: + - * / % и divmod, коэрция int с обеих сторон
3. Compound формы изменяют receiver на месте; при ошибке receiver прежний
4. Increment / decrement (префиксные и постфиксные)
5. Полный порядок, согласованный с математическим значением
6. Канонический ноль, потолок разрядности
7. Свойства: round-trip, коммутативность, ассоциативность,
   аддитивная обратная, division identity (эталон — native int)
"""

import copy
import io
import random

import pytest

from src.bigint import (
    DEFAULT_MAX_DIGITS,
    BigInteger,
    BigIntegerDivisionByZero,
    BigIntegerOverflow,
    DigitLimits,
    InvalidNumberFormat,
    limits_override,
)


def _truncating_divmod(a: int, b: int) -> tuple[int, int]:
    """Эталон: деление native int с округлением к нулю."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


@pytest.fixture
def rng():
    """Детерминированный генератор для property-проверок."""
    return random.Random(1337)


def _random_int(rng: random.Random, max_digits: int = 60) -> int:
    digits = rng.randint(1, max_digits)
    value = rng.randrange(10 ** (digits - 1), 10**digits)
    return -value if rng.random() < 0.5 else value


# =============================================================================
# ТЕСТЫ: Конструирование
# =============================================================================


class TestConstruction:
    """Тесты конструкторов."""

    def test_default_is_zero(self):
        value = BigInteger()
        assert str(value) == "0"
        assert value.negative is False
        assert value.limbs == (0,)

    @pytest.mark.parametrize(
        "native",
        [0, 1, -1, 2**31 - 1, -(2**31), 2**32 - 1, 2**63 - 1, -(2**63), 10**100],
    )
    def test_from_native_int(self, native):
        value = BigInteger(native)
        assert int(value) == native
        assert str(value) == str(native)

    def test_from_string(self):
        assert str(BigInteger("-000123")) == "-123"
        assert str(BigInteger("+5")) == "5"
        assert str(BigInteger(b"42")) == "42"

    def test_007_parses_to_7(self):
        assert str(BigInteger("007")) == "7"

    def test_negative_zero_canonical(self):
        """BigInteger("-0") == BigInteger(0), negative == False."""
        value = BigInteger("-0")
        assert value == BigInteger(0)
        assert value.negative is False

    def test_copy_constructor(self):
        original = BigInteger("-98765432109876543210")
        duplicate = BigInteger(original)
        assert duplicate == original
        assert duplicate is not original

        duplicate += 1
        assert original == BigInteger("-98765432109876543210")

    def test_bool_accepted_as_int(self):
        assert BigInteger(True) == 1
        assert BigInteger(False) == 0

    @pytest.mark.parametrize("bad", [1.5, None, [1, 2], object()])
    def test_unsupported_type(self, bad):
        with pytest.raises(TypeError, match="Cannot construct BigInteger"):
            BigInteger(bad)

    @pytest.mark.parametrize("text", ["", "-", "12x", "1_000"])
    def test_invalid_string(self, text):
        with pytest.raises(InvalidNumberFormat):
            BigInteger(text)

    def test_from_limbs(self):
        value = BigInteger.from_limbs([7, 1, 0, 0], negative=True)
        assert str(value) == "-1000000007"
        assert value.limbs == (7, 1)

    def test_from_limbs_zero_not_negative(self):
        assert BigInteger.from_limbs([0, 0], negative=True).negative is False

    def test_from_limbs_rejects_bad_limb(self):
        with pytest.raises(ValueError, match="limb"):
            BigInteger.from_limbs([1_000_000_000])


# =============================================================================
# ТЕСТЫ: Потолок разрядности
# =============================================================================


class TestCeiling:
    """Тесты потолка разрядности."""

    def test_string_at_ceiling_succeeds(self):
        value = BigInteger("1" * DEFAULT_MAX_DIGITS)
        assert value.digit_count() == DEFAULT_MAX_DIGITS

    def test_string_over_ceiling_fails(self):
        with pytest.raises(BigIntegerOverflow):
            BigInteger("1" * (DEFAULT_MAX_DIGITS + 1))

    def test_native_int_over_ceiling_fails(self):
        limits = DigitLimits(max_digits=5)
        assert BigInteger(99999, limits=limits) == 99999

        with pytest.raises(BigIntegerOverflow):
            BigInteger(100000, limits=limits)

        with pytest.raises(BigIntegerOverflow):
            BigInteger(-(10**500), limits=limits)

    def test_addition_overflow(self):
        limits = DigitLimits(max_digits=9)
        value = BigInteger("999999999", limits=limits)
        with pytest.raises(BigIntegerOverflow):
            value + 1

    def test_multiplication_overflow(self):
        limits = DigitLimits(max_digits=20)
        value = BigInteger("9" * 11, limits=limits)
        with pytest.raises(BigIntegerOverflow):
            value * value

    def test_default_ceiling_multiplication_overflow(self):
        big = BigInteger("9" * 20000)
        with pytest.raises(BigIntegerOverflow):
            big * big

    def test_process_default_override(self):
        with limits_override(DigitLimits(max_digits=4)):
            assert BigInteger("9999") == 9999
            with pytest.raises(BigIntegerOverflow):
                BigInteger("10000")

        assert BigInteger("10000") == 10000

    def test_result_inherits_left_operand_limits(self):
        limits = DigitLimits(max_digits=12)
        result = BigInteger(5, limits=limits) + 1
        assert result.limits is limits

    def test_copy_with_smaller_limits_checked(self):
        value = BigInteger("123456")
        with pytest.raises(BigIntegerOverflow):
            BigInteger(value, limits=DigitLimits(max_digits=3))


# =============================================================================
# ТЕСТЫ: Арифметика
# =============================================================================


class TestArithmetic:
    """Тесты бинарных операторов."""

    def test_carry_scenario(self):
        """999999999 + 1 → 1000000000"""
        assert str(BigInteger("999999999") + BigInteger("1")) == "1000000000"

    def test_multiplication_scenario(self):
        """10^18 * 10^18 → 10^36"""
        a = BigInteger("1000000000000000000")
        assert str(a * a) == "1" + "0" * 36

    @pytest.mark.parametrize(
        "a, b, quotient, remainder",
        [
            ("7", "2", "3", "1"),
            ("-7", "2", "-3", "-1"),
            ("7", "-2", "-3", "1"),
            ("-7", "-2", "3", "-1"),
        ],
    )
    def test_division_scenarios(self, a, b, quotient, remainder):
        assert str(BigInteger(a) / BigInteger(b)) == quotient
        assert str(BigInteger(a) % BigInteger(b)) == remainder

    def test_division_by_zero(self):
        """5 / 0 → DivisionByZero."""
        with pytest.raises(BigIntegerDivisionByZero):
            BigInteger("5") / BigInteger("0")

        with pytest.raises(BigIntegerDivisionByZero):
            BigInteger("5") % BigInteger("0")

        with pytest.raises(ZeroDivisionError):
            divmod(BigInteger(5), 0)

    def test_divmod(self):
        quotient, remainder = divmod(BigInteger(-17), BigInteger(5))
        assert (quotient, remainder) == (BigInteger(-3), BigInteger(-2))

    def test_unary(self):
        value = BigInteger(-12)
        assert -value == 12
        assert +value == -12
        assert +value is not value
        assert abs(value) == 12
        assert (-BigInteger(0)).negative is False

    def test_int_coercion_both_sides(self):
        value = BigInteger(10)
        assert value + 5 == 15
        assert 5 + value == 15
        assert value - 3 == 7
        assert 3 - value == -7
        assert value * -2 == -20
        assert -2 * value == -20
        assert value / 3 == 3
        assert 100 / value == 10
        assert value % 3 == 1
        assert 23 % value == 3
        assert divmod(23, value) == (2, 3)

    def test_unsupported_operand_type(self):
        with pytest.raises(TypeError):
            BigInteger(1) + 1.5

        with pytest.raises(TypeError):
            None - BigInteger(2)

    def test_floor_division_not_supported(self):
        with pytest.raises(TypeError):
            BigInteger(7) // 2

    def test_binary_operators_do_not_mutate(self):
        a = BigInteger(40)
        b = BigInteger(2)
        a + b
        a - b
        a * b
        a / b
        a % b
        assert a == 40
        assert b == 2


# =============================================================================
# ТЕСТЫ: Compound формы и increment/decrement
# =============================================================================


class TestInPlace:
    """Тесты compound форм."""

    def test_compound_mutates_receiver(self):
        value = BigInteger(10)
        alias = value

        value += 5
        value -= 3
        value *= 4
        value /= 6
        value %= 5

        assert value is alias
        assert alias == 3

    def test_compound_with_big_operand(self):
        value = BigInteger("999999999999999999")
        value += BigInteger(1)
        assert str(value) == "1000000000000000000"

    def test_failed_compound_leaves_receiver_unchanged(self):
        value = BigInteger(42)
        alias = value

        with pytest.raises(BigIntegerDivisionByZero):
            value /= 0
        assert alias == 42

        limited = BigInteger(999, limits=DigitLimits(max_digits=3))
        with pytest.raises(BigIntegerOverflow):
            limited += 1
        assert limited == 999


class TestIncrementDecrement:
    """Тесты ++ / --."""

    def test_prefix_increment_returns_self(self):
        value = BigInteger(1)
        assert value.increment() is value
        assert value == 2

    def test_postfix_increment_returns_previous(self):
        value = BigInteger(1)
        previous = value.post_increment()
        assert previous == 1
        assert value == 2

    def test_decrement_through_zero(self):
        value = BigInteger(1)
        value.decrement()
        assert value == 0 and value.negative is False
        value.decrement()
        assert str(value) == "-1"

    def test_postfix_decrement_returns_previous(self):
        value = BigInteger(0)
        previous = value.post_decrement()
        assert previous == 0
        assert value == -1

    def test_increment_across_limb_boundary(self):
        value = BigInteger("999999999")
        value.increment()
        assert str(value) == "1000000000"
        value.decrement()
        assert str(value) == "999999999"

    def test_negative_increment_to_zero(self):
        value = BigInteger(-1)
        value.increment()
        assert value == 0
        assert value.negative is False

    def test_decrement_negative_across_limb_boundary(self):
        value = BigInteger("-999999999")
        value.decrement()
        assert str(value) == "-1000000000"


# =============================================================================
# ТЕСТЫ: Сравнение и конверсии
# =============================================================================


class TestComparison:
    """Тесты операторов сравнения."""

    @pytest.mark.parametrize(
        "a, b",
        [
            (0, 0),
            (1, 2),
            (-1, 1),
            (-2, -1),
            (10**9, 10**9 - 1),
            (-(10**9), -(10**9 - 1)),
            (10**30, -(10**30)),
            (123456789123, 123456789124),
        ],
    )
    def test_matches_native_order(self, a, b):
        x, y = BigInteger(a), BigInteger(b)
        assert (x == y) == (a == b)
        assert (x != y) == (a != b)
        assert (x < y) == (a < b)
        assert (x <= y) == (a <= b)
        assert (x > y) == (a > b)
        assert (x >= y) == (a >= b)

    def test_compare_with_int(self):
        assert BigInteger(5) == 5
        assert BigInteger(5) > 4
        assert 4 < BigInteger(5)
        assert BigInteger(-5) < 0

    def test_compare_with_huge_int_does_not_raise(self):
        """Сравнение с int за потолком не падает."""
        with limits_override(DigitLimits(max_digits=3)):
            assert BigInteger(999) < 10**100

    def test_compare_with_other_types(self):
        assert (BigInteger(1) == "1") is False
        assert (BigInteger(1) != None) is True  # noqa: E711
        with pytest.raises(TypeError):
            BigInteger(1) < 1.5

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(BigInteger(1))


class TestConversions:
    """Тесты bool / int / str / repr / copy."""

    def test_bool(self):
        assert bool(BigInteger(0)) is False
        assert bool(BigInteger("-0")) is False
        assert bool(BigInteger(-3)) is True
        assert bool(BigInteger("1000000000")) is True

    def test_int(self):
        assert int(BigInteger("-123456789012345678901234567890")) == (
            -123456789012345678901234567890
        )

    def test_repr(self):
        assert repr(BigInteger(-15)) == "BigInteger('-15')"

    def test_str_never_has_plus_or_leading_zeros(self):
        assert str(BigInteger("+000000000000001")) == "1"

    def test_copy_module(self):
        value = BigInteger(77)
        shallow = copy.copy(value)
        deep = copy.deepcopy(value)
        shallow += 1
        deep -= 1
        assert value == 77

    def test_limbs_are_read_only_copy(self):
        value = BigInteger("1000000001")
        assert value.limbs == (1, 1)
        assert isinstance(value.limbs, tuple)


class TestStreamIO:
    """Тесты read_from / write_to."""

    def test_read_sequence(self):
        stream = io.StringIO("12 -000034\n999999999999\n")
        assert BigInteger.read_from(stream) == 12
        assert BigInteger.read_from(stream) == -34
        assert str(BigInteger.read_from(stream)) == "999999999999"

        with pytest.raises(EOFError):
            BigInteger.read_from(stream)

    def test_read_invalid_token(self):
        with pytest.raises(InvalidNumberFormat):
            BigInteger.read_from(io.StringIO("12abc"))

    def test_write(self):
        stream = io.StringIO()
        BigInteger("-1000000007").write_to(stream)
        assert stream.getvalue() == "-1000000007"


# =============================================================================
# ТЕСТЫ: Свойства (эталон — native int)
# =============================================================================


class TestProperties:
    """Property-проверки на детерминированной случайной выборке."""

    def test_round_trip(self, rng):
        """parse(format(v)) == v"""
        for _ in range(200):
            value = BigInteger(_random_int(rng))
            assert BigInteger(str(value)) == value

    def test_addition_and_multiplication_laws(self, rng):
        """Коммутативность и ассоциативность + и *."""
        for _ in range(100):
            a = BigInteger(_random_int(rng))
            b = BigInteger(_random_int(rng))
            c = BigInteger(_random_int(rng))

            assert a + b == b + a
            assert (a + b) + c == a + (b + c)
            assert a * b == b * a
            assert (a * b) * c == a * (b * c)

    def test_additive_inverse(self, rng):
        """a + (-a) == 0, a - a == 0."""
        for _ in range(100):
            a = BigInteger(_random_int(rng))
            zero = a + (-a)
            assert zero == 0 and zero.negative is False
            zero = a - a
            assert zero == 0 and zero.negative is False

    def test_matches_native_arithmetic(self, rng):
        for _ in range(150):
            x = _random_int(rng)
            y = _random_int(rng, max_digits=30)
            a, b = BigInteger(x), BigInteger(y)

            assert int(a + b) == x + y
            assert int(a - b) == x - y
            assert int(a * b) == x * y

            expected_q, expected_r = _truncating_divmod(x, y)
            assert int(a / b) == expected_q
            assert int(a % b) == expected_r

    def test_division_identity(self, rng):
        """(a / b) * b + a % b == a, знак % совпадает со знаком a."""
        for _ in range(150):
            a = BigInteger(_random_int(rng))
            b = BigInteger(_random_int(rng, max_digits=25))

            remainder = a % b
            assert (a / b) * b + remainder == a
            assert not remainder or remainder.negative == a.negative

    def test_ordering_totality(self, rng):
        """Ровно одно из a < b, a == b, a > b — как у native int."""
        values = [_random_int(rng, max_digits=20) for _ in range(40)] + [0, 0, 5, -5]
        for x in values:
            for y in values:
                a, b = BigInteger(x), BigInteger(y)
                outcomes = [a < b, a == b, a > b]
                assert outcomes.count(True) == 1
                assert outcomes == [x < y, x == y, x > y]
