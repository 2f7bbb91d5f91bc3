"""
Tests for eve-marketdata.com resource models and envelope decoding.
"""

from __future__ import annotations

import pytest


class TestEnvelope:
    """Test emd_result."""

    def test_unwraps_result(self):
        from evelib.models.marketdata import emd_result

        assert emd_result({"emd": {"version": 2, "result": [1, 2]}}) == [1, 2]

    def test_error_message_raised(self):
        from evelib.core.errors import RequestError
        from evelib.models.marketdata import emd_result

        with pytest.raises(RequestError, match="char_name"):
            emd_result({"emd": {"version": 2, "error": "char_name is required"}})

    def test_missing_result(self):
        from evelib.core.errors import DecodeError
        from evelib.models.marketdata import emd_result

        with pytest.raises(DecodeError) as exc_info:
            emd_result({"emd": {"version": 2}})

        assert exc_info.value.field == "result"

    def test_not_an_object(self):
        from evelib.core.errors import DecodeError
        from evelib.models.marketdata import emd_result

        with pytest.raises(DecodeError):
            emd_result([])


class TestRecentUploads:
    """Test RecentUploads decoding."""

    def test_mixed_enum_spellings(self, json_fixture):
        from evelib.core.registry import decode_document
        from evelib.models.enums import UploadType
        from evelib.models.marketdata import RecentUploads

        uploads = decode_document(RecentUploads, json_fixture("marketdata/recent_uploads.json"))

        assert [u.upload_type for u in uploads.uploads] == [
            UploadType.ORDERS,
            UploadType.HISTORY,
            UploadType.FULL,
        ]
        assert [u.type_id for u in uploads.uploads] == [34, 35, 36]

    def test_single_row_result(self, json_fixture):
        from evelib.core.registry import decode_document
        from evelib.models.enums import UploadType
        from evelib.models.marketdata import RecentUploads

        uploads = decode_document(
            RecentUploads, json_fixture("marketdata/recent_uploads_single.json")
        )

        assert len(uploads.uploads) == 1
        entry = uploads.uploads[0]
        assert entry.type_id == 34
        assert entry.region_id == 10000002
        assert entry.upload_type is UploadType.FULL
        assert entry.updated == "2014-01-01"

    def test_single_row_equals_array(self, recent_upload_row):
        from evelib.core.registry import decode_document
        from evelib.models.marketdata import RecentUploads

        single = decode_document(RecentUploads, {"emd": {"result": {"row": recent_upload_row}}})
        array = decode_document(
            RecentUploads, {"emd": {"result": [{"row": recent_upload_row}]}}
        )

        assert single.uploads == array.uploads

    def test_empty_result(self):
        from evelib.core.registry import decode_document
        from evelib.models.marketdata import RecentUploads

        uploads = decode_document(RecentUploads, {"emd": {"version": 2, "result": []}})

        assert uploads.uploads == []

    def test_unknown_upload_type(self, recent_upload_row):
        from evelib.core.errors import UnknownEnumToken
        from evelib.core.registry import decode_document
        from evelib.models.marketdata import RecentUploads

        bad = dict(recent_upload_row, upload_type="x")

        with pytest.raises(UnknownEnumToken) as exc_info:
            decode_document(
                RecentUploads, {"emd": {"result": [{"row": recent_upload_row}, {"row": bad}]}}
            )

        assert exc_info.value.row_index == 1


class TestItemOrders:
    """Test ItemOrders decoding."""

    def test_orders(self, json_fixture):
        from evelib.core.registry import decode_document
        from evelib.models.enums import OrderType
        from evelib.models.marketdata import ItemOrders

        orders = decode_document(ItemOrders, json_fixture("marketdata/item_orders.json")).orders

        assert [o.order_type for o in orders] == [OrderType.SELL, OrderType.BUY]
        assert orders[0].order_id == 4012345678
        assert orders[0].price == pytest.approx(5.01)
        assert orders[0].vol_remaining == 750000
        assert orders[1].order_range == 32767
        assert orders[1].station_id == 60003760


class TestItemPrices:
    """Test ItemPrices decoding."""

    def test_prices(self):
        from evelib.core.registry import decode_document
        from evelib.models.enums import OrderType
        from evelib.models.marketdata import ItemPrices

        prices = decode_document(
            ItemPrices,
            {
                "emd": {
                    "result": [
                        {"row": {"buysell": "s", "typeID": "34", "regionID": "10000002",
                                 "price": "5.01", "updated": "2014-01-01 11:00:00"}},
                        {"row": {"buysell": 0, "typeID": "35", "regionID": "10000002",
                                 "price": "12.5"}},
                    ]
                }
            },
        ).prices

        assert [p.order_type for p in prices] == [OrderType.SELL, OrderType.SELL]
        assert prices[1].price == pytest.approx(12.5)
        assert prices[1].updated is None


class TestItemHistory:
    """Test ItemHistory decoding."""

    def test_history(self, json_fixture):
        from evelib.core.registry import decode_document
        from evelib.models.marketdata import ItemHistory

        history = decode_document(
            ItemHistory, json_fixture("marketdata/item_history.json")
        ).history

        assert [day.date for day in history] == ["2013-12-30", "2013-12-31"]
        assert history[0].volume == 9000000000
        assert history[1].avg_price == pytest.approx(5.30)

    def test_missing_column_named(self):
        from evelib.core.errors import DecodeError
        from evelib.core.registry import decode_document
        from evelib.models.marketdata import ItemHistory

        with pytest.raises(DecodeError) as exc_info:
            decode_document(
                ItemHistory,
                {"emd": {"result": {"row": {"typeID": "34", "regionID": "10000002"}}}},
            )

        assert exc_info.value.field == "date"
        assert exc_info.value.row_index == 0
