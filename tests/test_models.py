# -*- coding: utf-8 -*-
"""
Tests for model decoding and encoding and the conversion helpers.
"""

import pytest
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

from alpaca_client import broker, marketdata, trading
from alpaca_client.utils import (
    format_datetime,
    parse_date,
    parse_datetime,
    path_segment,
    sanitize_dict,
)


class TestDecoding:
    """Test Model.from_dict."""

    def test_order_decoding(self, order_data):
        """Test decimals, enums, datetimes and nulls."""
        order = trading.Order.from_dict(order_data)
        assert order.qty == Decimal("10")
        assert order.type == trading.OrderType.LIMIT
        assert order.time_in_force == trading.TimeInForce.DAY
        assert order.asset_class == trading.AssetClass.US_EQUITY
        assert order.submitted_at == datetime(2024, 3, 1, 14, 30, 0, 200000, tzinfo=timezone.utc)
        assert order.filled_at is None
        assert order.legs is None

    def test_nested_legs(self, order_data):
        """Test that self-referencing legs decode to orders."""
        leg = dict(order_data, id="leg-1", type="stop", stop_price="150")
        order = trading.Order.from_dict(dict(order_data, legs=[leg]))
        assert order.legs[0].id == "leg-1"
        assert order.legs[0].type == trading.OrderType.STOP
        assert order.legs[0].stop_price == Decimal("150")

    def test_unknown_keys_ignored(self):
        """Test that fields added by the server do not break decoding."""
        clock = trading.Clock.from_dict({"is_open": True, "brand_new_field": 1})
        assert clock.is_open is True

    def test_unknown_enum_value(self):
        """Test that unknown enum values decode to UNSPECIFIED."""
        order = trading.Order.from_dict({"side": "sideways"})
        assert order.side == trading.OrderSide.UNSPECIFIED

    def test_empty_payload(self):
        """Test that None decodes to an all-None model."""
        assert trading.Account.from_dict(None) == trading.Account()

    def test_models_are_frozen(self):
        """Test that decoded models cannot be mutated."""
        clock = trading.Clock.from_dict({"is_open": True})
        with pytest.raises(AttributeError):
            clock.is_open = False

    def test_wire_keys(self):
        """Test short market data keys map to descriptive names."""
        trade = marketdata.Trade.from_dict({"t": "2024-03-01T14:30:00Z", "p": 100.5, "s": 7,
                                            "c": ["@", "I"], "x": "V"})
        assert trade.price == Decimal("100.5")
        assert trade.size == 7
        assert trade.conditions == ["@", "I"]
        assert trade.exchange == "V"

    def test_broker_account_records(self, broker_accounts_data):
        """Test nested account sub-records."""
        account = broker.BrokerAccount.from_dict(broker_accounts_data[0])
        assert account.status == trading.AccountStatus.APPROVED
        assert account.identity.family_name == "Doe"
        assert account.agreements[0].signed_at == datetime(2024, 2, 10, 16, 0, tzinfo=timezone.utc)

    def test_integral_values_decode_to_int(self):
        """Test that whole numbers sent as floats or strings become ints."""
        bar = marketdata.Bar.from_dict({"v": 1234.0, "n": "56"})
        assert bar.volume == 1234
        assert isinstance(bar.volume, int)
        assert bar.trade_count == 56

    def test_fractional_int_field_is_not_truncated(self):
        """Test that a fractional number in an int field keeps its value."""
        assert marketdata.Bar.from_dict({"v": 1234.7}).volume == Decimal("1234.7")
        assert marketdata.Bar.from_dict({"v": "1234.5"}).volume == Decimal("1234.5")

    def test_empty_string_numbers_decode_to_none(self):
        """Test that empty strings in decimal and int fields decode to None."""
        order = trading.Order.from_dict({"limit_price": "", "stop_price": "150.5"})
        assert order.limit_price is None
        assert order.stop_price == Decimal("150.5")
        assert marketdata.Bar.from_dict({"v": ""}).volume is None

    def test_short_sale_activity_side(self):
        """Test that fill activities keep the sell_short side."""
        activity = trading.AccountActivity.from_dict({"activity_type": "FILL", "side": "sell_short"})
        assert activity.side == trading.ActivitySide.SELL_SHORT
        assert trading.AccountActivity.from_dict({"side": "buy"}).side == trading.ActivitySide.BUY


class TestEncoding:
    """Test Model.to_dict and Request.to_params."""

    def test_path_fields_excluded(self):
        """Test that path fields are never sent as parameters."""
        request = trading.ClosePositionRequest(symbol_or_asset_id="AAPL", qty=Decimal("1"))
        assert request.to_params() == {"qty": "1"}
        assert request.to_dict() == {"qty": "1"}

    def test_query_encoding(self):
        """Test booleans, lists, enums and datetimes in a query."""
        request = trading.ListOrdersRequest(
            status="all",
            after=datetime(2024, 3, 1, 9, 30, tzinfo=timezone(timedelta(hours=-5))),
            nested=False,
            symbols=["AAPL"],
            side=trading.OrderSide.SELL,
        )
        assert request.to_params() == {
            "status": "all",
            "after": "2024-03-01T14:30:00Z",
            "nested": "false",
            "symbols": "AAPL",
            "side": "sell",
        }

    def test_body_keeps_native_types(self):
        """Test that JSON bodies keep booleans and lists."""
        request = trading.UpdateWatchlistRequest(watchlist_id="w1", name="x", symbols=["A", "B"])
        assert request.to_dict() == {"name": "x", "symbols": ["A", "B"]}

    def test_empty_values_dropped(self):
        """Test that None and empty strings are not sent."""
        request = trading.ListAssetsRequest(exchange="", status=None)
        assert request.to_params() == {}

    def test_enum_list_in_query(self):
        """Test that lists of enums join their values."""
        request = trading.GetAccountActivitiesRequest(
            activity_types=[trading.ActivityType.FILL, trading.ActivityType.DIV]
        )
        assert request.to_params() == {"activity_types": "FILL,DIV"}


class TestUtils:
    """Test conversion helpers."""

    def test_parse_datetime_nanoseconds(self):
        """Test that nanosecond fractions are truncated."""
        value = parse_datetime("2024-03-01T14:30:00.123456789Z")
        assert value == datetime(2024, 3, 1, 14, 30, 0, 123456, tzinfo=timezone.utc)

    def test_parse_datetime_short_fraction_and_offset(self):
        """Test that short fractions are padded and offsets kept."""
        value = parse_datetime("2024-03-01T09:30:00.5-05:00")
        assert value.microsecond == 500000
        assert value.utcoffset() == timedelta(hours=-5)

    def test_parse_datetime_unix_seconds(self):
        """Test that numbers are read as Unix seconds."""
        assert parse_datetime(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)

    def test_parse_date(self):
        """Test dates and timestamps cut to dates."""
        assert parse_date("2024-03-01") == date(2024, 3, 1)
        assert parse_date("2024-03-01T00:00:00Z") == date(2024, 3, 1)

    def test_format_naive_datetime(self):
        """Test that naive datetimes are taken as UTC."""
        assert format_datetime(datetime(2024, 3, 1, 12, 0)) == "2024-03-01T12:00:00Z"

    def test_path_segment(self):
        """Test quoting of path values and enums."""
        assert path_segment("BTC/USD") == "BTC%2FUSD"
        assert path_segment("a b") == "a%20b"
        assert path_segment(marketdata.CryptoLoc.US_1) == "us-1"

    def test_sanitize_dict(self):
        """Test that falsy values other than None and empty strings are kept."""
        assert sanitize_dict({"a": None, "b": "", "c": 0, "d": False}) == {"c": 0, "d": False}
