"""Unit tests for the CoinRecord Pydantic model."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from slip44gen.domain import CoinRecord, is_identifier, safe_create

SAMPLE = {
    "id": 60,
    "ids": [60, 61],
    "path_component": "0x8000003c",
    "symbol": "ETH",
    "name": "Ethereum",
    "original_name": "Ether",
}


class TestCoinRecordValidation:
    """Test field validation and coercion."""

    def test_valid_sample_passes(self):
        record = CoinRecord(**SAMPLE)

        assert record.id == 60
        assert record.ids == [60, 61]
        assert record.symbol == "ETH"
        assert record.doc_lines == []

    def test_empty_symbol_becomes_none(self):
        record = CoinRecord(**{**SAMPLE, "symbol": ""})
        assert record.symbol is None

    @pytest.mark.parametrize("name", ["", "1Coin", "Unit-e", "Ether Classic", "θ"])
    def test_invalid_identifier_name_rejected(self, name):
        with pytest.raises(ValidationError, match="name"):
            CoinRecord(**{**SAMPLE, "name": name})

    def test_non_identifier_symbol_rejected(self):
        with pytest.raises(ValidationError, match="symbol"):
            CoinRecord(**{**SAMPLE, "symbol": "$DAG"})

    def test_empty_ids_rejected(self):
        with pytest.raises(ValidationError, match="ids cannot be empty"):
            CoinRecord(**{**SAMPLE, "ids": []})

    def test_negative_id_rejected(self):
        with pytest.raises(ValidationError):
            CoinRecord(**{**SAMPLE, "id": -1, "ids": [-1]})

    def test_primary_id_must_be_member_of_ids(self):
        with pytest.raises(ValidationError, match="id must be one of ids"):
            CoinRecord(**{**SAMPLE, "id": 1})

    def test_blank_original_name_rejected(self):
        with pytest.raises(ValidationError, match="original_name"):
            CoinRecord(**{**SAMPLE, "original_name": "   "})

    def test_merge_key(self):
        record = CoinRecord(**SAMPLE)
        assert record.merge_key == ("ETH", "Ethereum", "Ether")


class TestIsIdentifier:
    @pytest.mark.parametrize("value", ["Bitcoin", "_2give", "Foo_11_12", "a"])
    def test_valid(self, value):
        assert is_identifier(value)

    @pytest.mark.parametrize("value", ["", "2give", "Foo-Bar", "Foo.Bar", "æternity"])
    def test_invalid(self, value):
        assert not is_identifier(value)


class TestSafeCreate:
    def test_returns_record_for_valid_data(self):
        assert isinstance(safe_create(SAMPLE), CoinRecord)

    def test_logs_structured_warning_and_returns_none(self, caplog):
        caplog.set_level(logging.WARNING, logger="slip44gen.coins.validation")

        record = safe_create({**SAMPLE, "name": "Bad-Name"}, line_no=42)

        assert record is None
        assert len(caplog.records) == 1
        log_record = caplog.records[0]
        assert log_record.name == "slip44gen.coins.validation"
        message = log_record.getMessage()
        assert "line=42" in message
        assert "coin=Ether" in message
        assert "field=name" in message
        assert "error=" in message
