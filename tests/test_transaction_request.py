"""Tests for the immutable transaction request builder."""

from decimal import Decimal

import pytest

from gateway_facade.engine.errors import RequestError
from gateway_facade.models.request import TransactionRequest, round_amount


class TestAmount:
    def test_rounds_up_to_cents(self):
        request = TransactionRequest().with_amount(19.999)
        assert request.amount == Decimal("20.00")

    def test_rounds_half_up(self):
        assert round_amount("10.005") == Decimal("10.01")
        assert round_amount(10.004) == Decimal("10.00")

    def test_integer_amount(self):
        assert TransactionRequest().with_amount(10).amount == Decimal("10.00")

    def test_decimal_amount_kept(self):
        assert round_amount(Decimal("5.5")) == Decimal("5.50")

    def test_invalid_amount(self):
        with pytest.raises(RequestError) as exc:
            TransactionRequest().with_amount("ten dollars")
        assert exc.value.field == "amount"


class TestCreditCard:
    def test_number_and_present_optionals(self):
        request = TransactionRequest().with_credit_card({
            "number": "4111111111111111",
            "cvv": "123",
            "expiration_date": "12/2030",
        })
        assert dict(request.credit_card) == {
            "number": "4111111111111111",
            "cvv": "123",
            "expiration_date": "12/2030",
        }

    def test_none_and_unknown_fields_dropped(self):
        request = TransactionRequest().with_credit_card({
            "number": "4111111111111111",
            "cvv": None,
            "nickname": "work card",
        })
        assert dict(request.credit_card) == {"number": "4111111111111111"}

    def test_number_required(self):
        with pytest.raises(RequestError):
            TransactionRequest().with_credit_card({"cvv": "123"})

    def test_empty_card_rejected(self):
        with pytest.raises(RequestError):
            TransactionRequest().with_credit_card({})


class TestOptions:
    def test_card_then_amount_no_cross_contamination(self):
        request = (
            TransactionRequest()
            .with_credit_card({"number": "4111111111111111", "cvv": "123"})
            .with_options({"amount": 10})
        )
        assert request.amount == Decimal("10.00")
        assert dict(request.credit_card) == {"number": "4111111111111111", "cvv": "123"}
        assert "amount" not in request.credit_card
        assert dict(request.extra) == {}

    def test_amount_and_card_routed_through_setters(self):
        request = TransactionRequest().with_options({
            "amount": "12.345",
            "credit_card": {"number": "4111111111111111", "cvv": None},
        })
        assert request.amount == Decimal("12.35")
        assert dict(request.credit_card) == {"number": "4111111111111111"}

    def test_known_fields_fill_slots(self):
        request = TransactionRequest().with_options({
            "customer_id": "cust_001",
            "payment_method_nonce": "fake-valid-nonce",
            "billing": {"postal_code": "60622"},
        })
        assert request.customer_id == "cust_001"
        assert request.payment_method_nonce == "fake-valid-nonce"
        assert dict(request.billing) == {"postal_code": "60622"}

    def test_unknown_fields_kept_as_extra(self):
        request = TransactionRequest().with_options({"order_id": "ORD-1"})
        assert dict(request.extra) == {"order_id": "ORD-1"}

    def test_empty_bag_is_noop(self):
        request = TransactionRequest().with_amount(5)
        assert request.with_options({}) is request
        assert request.with_options(None) is request


class TestImmutability:
    def test_setters_return_new_instances(self):
        base = TransactionRequest()
        charged = base.with_amount(10)
        assert base.amount is None
        assert charged.amount == Decimal("10.00")

    def test_source_dict_changes_do_not_leak(self):
        billing = {"postal_code": "60622"}
        request = TransactionRequest().with_billing(billing)
        billing["postal_code"] = "99999"
        assert request.billing["postal_code"] == "60622"

    def test_mappings_are_read_only(self):
        request = TransactionRequest().with_credit_card({"number": "4111111111111111"})
        with pytest.raises(TypeError):
            request.credit_card["cvv"] = "999"

    def test_attributes_are_frozen(self):
        request = TransactionRequest()
        with pytest.raises(AttributeError):
            request.amount = Decimal("1.00")


class TestSaleParams:
    def test_unset_fields_omitted(self):
        assert TransactionRequest().sale_params() == {}

    def test_full_payload(self):
        request = (
            TransactionRequest()
            .with_amount(10)
            .with_credit_card({"number": "4111111111111111"})
            .with_billing({"postal_code": "60622"})
            .with_customer_id("cust_001")
            .with_options({"order_id": "ORD-1"})
        )
        assert request.sale_params() == {
            "amount": Decimal("10.00"),
            "credit_card": {"number": "4111111111111111"},
            "billing": {"postal_code": "60622"},
            "customer_id": "cust_001",
            "order_id": "ORD-1",
        }

    def test_payload_is_a_plain_copy(self):
        request = TransactionRequest().with_credit_card({"number": "4111111111111111"})
        params = request.sale_params()
        params["credit_card"]["cvv"] = "123"
        assert "cvv" not in request.credit_card


class TestNestedImmutability:
    def test_nested_customer_fields_copied(self):
        source = {"credit_card": {"number": "4111111111111111"}}
        request = TransactionRequest().with_customer(source)
        source["credit_card"]["number"] = "5555555555554444"
        assert request.customer["credit_card"]["number"] == "4111111111111111"

    def test_nested_extra_copied(self):
        options = {"skip_avs": True}
        request = TransactionRequest().with_options({"options": options, "line_items": [{"name": "x"}]})
        options["skip_avs"] = False
        assert request.extra["options"]["skip_avs"] is True

    def test_nested_mappings_read_only(self):
        request = TransactionRequest().with_billing({"address": {"locality": "Chicago"}})
        with pytest.raises(TypeError):
            request.billing["address"]["locality"] = "Boston"

    def test_sale_params_are_deep_plain_copies(self):
        request = TransactionRequest().with_options({
            "options": {"skip_avs": True},
            "line_items": [{"name": "x"}],
        })
        params = request.sale_params()
        assert params == {"options": {"skip_avs": True}, "line_items": [{"name": "x"}]}
        assert type(params["options"]) is dict
        params["options"]["skip_avs"] = False
        params["line_items"][0]["name"] = "y"
        assert request.sale_params()["options"] == {"skip_avs": True}
        assert request.sale_params()["line_items"] == [{"name": "x"}]
