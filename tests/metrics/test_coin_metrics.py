"""Tests for generator Prometheus metrics."""

from __future__ import annotations

from prometheus_client import REGISTRY, generate_latest

from slip44gen.codegen import write_table
from slip44gen.ingestion.pipeline import build_coin_table


def _value(name: str, labels: dict | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


class TestCoinMetrics:
    def test_metrics_are_registered(self):
        import slip44gen.metrics  # noqa: F401

        output = generate_latest(REGISTRY).decode()

        assert "slip44_coins_emitted_total" in output
        assert "slip44_name_collisions_total" in output

    def test_row_outcomes_counted(self, registry_markdown):
        before = {
            outcome: _value("slip44_rows_total", {"outcome": outcome})
            for outcome in ("accepted", "reserved", "invalid_id", "columns", "name_error")
        }

        build_coin_table(registry_markdown)

        delta = {
            outcome: _value("slip44_rows_total", {"outcome": outcome}) - value
            for outcome, value in before.items()
        }
        assert delta == {
            "accepted": 14,
            "reserved": 2,
            "invalid_id": 1,
            "columns": 1,
            "name_error": 1,
        }

    def test_collisions_counted(self, registry_markdown):
        before = _value("slip44_name_collisions_total")

        build_coin_table(registry_markdown)

        # Foo (F1) and Foo (11, 12)
        assert _value("slip44_name_collisions_total") - before == 2

    def test_emitted_counted(self, registry_markdown, tmp_path):
        result = build_coin_table(registry_markdown)
        before = _value("slip44_coins_emitted_total")

        write_table(result.records, tmp_path / "coin.rs")

        assert _value("slip44_coins_emitted_total") - before == 12
