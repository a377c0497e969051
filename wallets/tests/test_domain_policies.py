import uuid
from decimal import Decimal

from django.test import SimpleTestCase

from wallets.domain.exceptions import (
    InvalidAmount,
    InvalidCount,
    InvalidInput,
    InvalidReceiver,
    InvalidSender,
    InvalidWalletId,
)
from wallets.domain.money import from_minor_units, to_minor_units
from wallets.domain.policies import (
    parse_amount,
    parse_count,
    parse_wallet_id,
    validate_positive_amount,
    validate_send_request,
)

SENDER = "6f1c3c9e-5b1a-4c36-9d8e-2f4b1a7c0d11"
RECEIVER = "0b8e7a52-91d4-4f0e-b3c2-5a6d9e8f7c22"


class ValidateSendRequestTests(SimpleTestCase):
    def test_accepts_well_formed_request(self):
        request = validate_send_request(SENDER, RECEIVER, "10.00")

        self.assertEqual(request.sender, uuid.UUID(SENDER))
        self.assertEqual(request.receiver, uuid.UUID(RECEIVER))
        self.assertEqual(request.amount, Decimal("10.00"))

    def test_rejects_malformed_sender(self):
        for invalid in ("", "not-a-uuid", "1234", None, 42):
            with self.subTest(invalid=invalid):
                with self.assertRaises(InvalidSender):
                    validate_send_request(invalid, RECEIVER, "10.00")

    def test_rejects_malformed_receiver(self):
        with self.assertRaises(InvalidReceiver):
            validate_send_request(SENDER, "zzzz", "10.00")

    def test_sender_is_checked_before_receiver_and_amount(self):
        with self.assertRaises(InvalidSender):
            validate_send_request("bad", "bad", "bad")

    def test_receiver_is_checked_before_amount(self):
        with self.assertRaises(InvalidReceiver):
            validate_send_request(SENDER, "bad", "bad")

    def test_validation_errors_are_invalid_input(self):
        with self.assertRaises(InvalidInput):
            validate_send_request(SENDER, RECEIVER, "1")


class ParseAmountTests(SimpleTestCase):
    def test_accepts_canonical_two_decimal_amounts(self):
        for raw, expected in (
            ("10.00", Decimal("10.00")),
            ("0.01", Decimal("0.01")),
            ("123456.78", Decimal("123456.78")),
        ):
            with self.subTest(raw=raw):
                self.assertEqual(parse_amount(raw), expected)

    def test_rejects_non_canonical_or_non_positive_amounts(self):
        for invalid in (
            "1",
            "1.5",
            "10.0",
            "1.000",
            "10.005",
            "0.00",
            "-1.00",
            "-5.00",
            "+1.00",
            " 1.00",
            "1.00 ",
            "1e2",
            "9e999999999999999999",
            "1e999999999",
            "1.00e0",
            "01.00",
            "\u0661.00",
            "1_0.00",
            "abc",
            "",
            "NaN",
            "Infinity",
        ):
            with self.subTest(invalid=invalid):
                with self.assertRaises(InvalidAmount):
                    parse_amount(invalid)

    def test_rejects_non_string_amounts(self):
        for invalid in (10, 10.0, None, Decimal("10.00")):
            with self.subTest(invalid=invalid):
                with self.assertRaises(InvalidAmount):
                    parse_amount(invalid)


class ParseCountTests(SimpleTestCase):
    def test_accepts_non_negative_integers(self):
        self.assertEqual(parse_count("0"), 0)
        self.assertEqual(parse_count("15"), 15)
        self.assertEqual(parse_count("+3"), 3)
        self.assertEqual(parse_count(7), 7)

    def test_rejects_missing_negative_or_non_integer(self):
        for invalid in (None, "", "-1", "1.5", "ten", " 3", "1_0", True, -2):
            with self.subTest(invalid=invalid):
                with self.assertRaises(InvalidCount):
                    parse_count(invalid)

    def test_accepts_largest_signed_64_bit_count(self):
        self.assertEqual(parse_count(str(2**63 - 1)), 2**63 - 1)

    def test_rejects_counts_beyond_signed_64_bit_range(self):
        for invalid in (str(2**63), "99999999999999999999", 2**64):
            with self.subTest(invalid=invalid):
                with self.assertRaises(InvalidCount):
                    parse_count(invalid)


class ParseWalletIdTests(SimpleTestCase):
    def test_accepts_uuid_string(self):
        self.assertEqual(parse_wallet_id(SENDER), uuid.UUID(SENDER))

    def test_rejects_malformed_id(self):
        with self.assertRaises(InvalidWalletId):
            parse_wallet_id("wallet-1")


class ValidatePositiveAmountTests(SimpleTestCase):
    def test_rejects_non_integer_values(self):
        for invalid in ("10", 10.5, True, None):
            with self.subTest(invalid=invalid):
                with self.assertRaises(InvalidAmount):
                    validate_positive_amount(invalid)

    def test_rejects_non_positive_integers(self):
        for invalid in (0, -1, -999):
            with self.subTest(invalid=invalid):
                with self.assertRaises(InvalidAmount):
                    validate_positive_amount(invalid)

    def test_accepts_positive_integer(self):
        self.assertEqual(validate_positive_amount(100), 100)


class MoneyConversionTests(SimpleTestCase):
    def test_to_minor_units(self):
        self.assertEqual(to_minor_units(Decimal("30.00")), 3_000)
        self.assertEqual(to_minor_units(Decimal("0.01")), 1)

    def test_from_minor_units_keeps_two_places(self):
        self.assertEqual(str(from_minor_units(7_000)), "70.00")
        self.assertEqual(str(from_minor_units(5)), "0.05")
