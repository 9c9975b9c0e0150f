"""Tests for the Polars .fuzzy expression namespace."""

import polars as pl
import pytest

import fuzzyratio  # noqa: F401  Registers the namespace


@pytest.fixture
def teams_df():
    return pl.DataFrame({"team": ["new york mets", "NY Mets", None]})


class TestNamespace:
    """Tests for namespace registration."""

    def test_registered(self):
        assert hasattr(pl.col("x"), "fuzzy")


class TestSimilarity:
    """Tests for .fuzzy.similarity and .fuzzy.is_similar."""

    def test_against_literal(self, teams_df):
        result = teams_df.select(
            score=pl.col("team").fuzzy.similarity("new york mets", scorer="ratio")
        )
        assert result["score"].dtype == pl.Int64
        assert result["score"].to_list() == [100, 70, 0]

    def test_against_column(self):
        df = pl.DataFrame({"a": ["abcd", "hello"], "b": ["abXd", "hallo"]})
        result = df.select(score=pl.col("a").fuzzy.similarity(pl.col("b"), scorer="ratio"))
        assert result["score"].to_list() == [75, 80]

    def test_is_similar(self, teams_df):
        result = teams_df.select(
            match=pl.col("team").fuzzy.is_similar("new york mets", min_score=80, scorer="ratio")
        )
        assert result["match"].to_list() == [True, False, False]

    def test_filter(self, teams_df):
        result = teams_df.filter(
            pl.col("team").fuzzy.is_similar("new york mets", min_score=60, scorer="ratio")
        )
        assert result["team"].to_list() == ["new york mets", "NY Mets"]

    def test_unknown_scorer(self, teams_df):
        with pytest.raises(fuzzyratio.ScorerError):
            pl.col("team").fuzzy.similarity("x", scorer="nope")

    def test_rejects_non_string_other(self):
        with pytest.raises(fuzzyratio.ValidationError, match="str or polars Expr"):
            pl.col("team").fuzzy.similarity(42)
        with pytest.raises(fuzzyratio.ValidationError):
            pl.col("team").fuzzy.distance(["a", "b"])


class TestDistance:
    """Tests for .fuzzy.distance."""

    def test_against_literal(self):
        df = pl.DataFrame({"word": ["kitten", "sitting"]})
        result = df.select(dist=pl.col("word").fuzzy.distance("sitting"))
        assert result["dist"].to_list() == [3, 0]

    def test_against_column(self):
        df = pl.DataFrame({"a": ["saturday", "abc"], "b": ["sunday", "abc"]})
        result = df.select(dist=pl.col("a").fuzzy.distance(pl.col("b")))
        assert result["dist"].to_list() == [3, 0]


class TestBestMatch:
    """Tests for .fuzzy.best_match."""

    def test_best_match(self):
        df = pl.DataFrame({"raw": ["ny mets", "braves", None]})
        teams = ["new york mets", "atlanta braves"]
        result = df.select(team=pl.col("raw").fuzzy.best_match(teams))
        assert result["team"].to_list() == ["new york mets", "atlanta braves", None]

    def test_min_score(self):
        df = pl.DataFrame({"raw": ["ny mets", "braves"]})
        teams = ["new york mets", "atlanta braves"]
        result = df.select(team=pl.col("raw").fuzzy.best_match(teams, min_score=95))
        assert result["team"].to_list() == [None, None]


class TestNormalize:
    """Tests for .fuzzy.normalize."""

    def test_normalize(self):
        df = pl.DataFrame({"name": ["New York-Mets!", None]})
        result = df.select(name=pl.col("name").fuzzy.normalize())
        assert result["name"].to_list() == ["new york mets", None]

    def test_force_ascii(self):
        df = pl.DataFrame({"name": ["Ça va?"]})
        result = df.select(name=pl.col("name").fuzzy.normalize(force_ascii=True))
        assert result["name"].to_list() == ["a va"]
