"""Tests for fixed and text-aware node metrics."""

import pytest

from famchart.core.metrics import (
    NodeMetrics,
    TextAwareNodeMetrics,
    approx_text_width,
    format_date_line,
)
from famchart.models.genealogy import FamilyRecord, GenealogyGraph, Individual


class TestNodeMetrics:

    def test_fixed_size_for_every_id(self):
        metrics = NodeMetrics(default_width=100.0, default_height=40.0)
        assert metrics.width("anything") == 100.0
        assert metrics.height("F1") == 40.0

    def test_defaults_come_from_settings(self):
        metrics = NodeMetrics()
        assert metrics.width("x") > 0
        assert metrics.height("x") > 0


class TestDateLine:

    def test_both_dates(self):
        ind = Individual(id="I", birth_date=" 1900 ", death_date="1980")
        assert format_date_line(ind) == "1900 - 1980"

    def test_birth_only(self):
        assert format_date_line(Individual(id="I", birth_date="1900")) == "b.:1900"

    def test_death_only(self):
        assert format_date_line(Individual(id="I", death_date="1980")) == "d.:1980"

    def test_cyrillic_prefix(self):
        ind = Individual(id="I", first_name="Иван", birth_date="1900")
        assert format_date_line(ind) == "род.:1900"

    def test_no_dates(self):
        assert format_date_line(Individual(id="I")) == ""


class TestTextAwareNodeMetrics:

    @pytest.fixture
    def graph(self):
        return GenealogyGraph(
            individuals=[
                Individual(id="short", first_name="Al"),
                Individual(id="long", first_name="Bartholomew-Alexander", last_name="Smith"),
            ],
            families=[FamilyRecord(id="F1", spouse_a_id="short", spouse_b_id="long")],
        )

    def test_minimum_width_for_short_names(self, graph):
        metrics = TextAwareNodeMetrics(graph)
        assert metrics.width("short") == 80.0

    def test_width_grows_with_name(self, graph):
        metrics = TextAwareNodeMetrics(graph)
        expected = approx_text_width("Bartholomew-Alexander", 12.0) + 24.0
        assert metrics.width("long") == pytest.approx(expected)

    def test_height_fits_three_lines(self, graph):
        metrics = TextAwareNodeMetrics(graph, base_font_size=20.0)
        # 2 * 10 padding + 3 * 1.2 * 20
        assert metrics.height("short") == pytest.approx(92.0)

    def test_family_falls_back_to_default(self, graph):
        metrics = TextAwareNodeMetrics(graph, default_width=30.0, default_height=10.0)
        assert metrics.width("F1") == 30.0
        assert metrics.height("F1") == 10.0

    def test_small_font_size_ignored(self, graph):
        metrics = TextAwareNodeMetrics(graph)
        metrics.set_base_font_size(5.0)
        assert metrics.base_font_size == 12.0
        metrics.set_base_font_size(14.0)
        assert metrics.base_font_size == 14.0

    def test_no_graph_uses_defaults(self):
        metrics = TextAwareNodeMetrics(default_width=50.0)
        assert metrics.width("I1") == 50.0
