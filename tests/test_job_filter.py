"""Tests for JobFilter parsing and matching."""

from decimal import Decimal

import pytest

from jobboard.errors import BadRequestError
from jobboard.models.job import Job
from jobboard.models.job_filter import JobFilter


def make_job(**kwargs):
    """Build an unsaved job with defaults."""
    fields = {"id": 1, "title": "engineer", "salary": 80000, "equity": "0", "company_handle": "c1"}
    fields.update(kwargs)
    return Job(**fields)


class TestFromQuery:
    """Test parsing raw query parameters."""

    def test_none_and_empty(self):
        """Test missing parameters give an empty filter."""
        assert JobFilter.from_query(None) == JobFilter()
        assert JobFilter.from_query({}).is_empty

    def test_all_parameters(self):
        """Test every recognized parameter is parsed."""
        job_filter = JobFilter.from_query(
            {"title": "eng", "minSalary": "90000", "hasEquity": "true"}
        )

        assert job_filter == JobFilter(title="eng", min_salary=90000, has_equity=True)

    def test_has_equity_true_literal(self):
        """Test the literal true enables the equity filter."""
        assert JobFilter.from_query({"hasEquity": "true"}).has_equity is True

    @pytest.mark.parametrize("raw", ["false", "TRUE", " true", "True", "yes", "1", ""])
    def test_has_equity_other_strings(self, raw):
        """Test anything but true leaves the equity filter off."""
        assert JobFilter.from_query({"hasEquity": raw}).has_equity is False

    def test_has_equity_real_bool(self):
        """Test an already-typed boolean passes through."""
        assert JobFilter.from_query({"hasEquity": True}).has_equity is True

    def test_min_salary_fractional(self):
        """Test a fractional minimum salary is kept as a number."""
        job_filter = JobFilter.from_query({"minSalary": "90000.5"})

        assert job_filter.min_salary == Decimal("90000.5")

    @pytest.mark.parametrize("raw", ["lots", "NaN", "Infinity", True])
    def test_min_salary_invalid(self, raw):
        """Test a minimum salary that is not a finite number is rejected."""
        with pytest.raises(BadRequestError, match="minSalary"):
            JobFilter.from_query({"minSalary": raw})

    def test_blank_values_ignored(self):
        """Test empty strings count as absent."""
        job_filter = JobFilter.from_query({"title": "  ", "minSalary": ""})

        assert job_filter.title is None
        assert job_filter.min_salary is None

    def test_unknown_keys_ignored(self):
        """Test unrelated parameters are dropped."""
        assert JobFilter.from_query({"page": "2", "salary": "10"}).is_empty


class TestMatches:
    """Test applying a filter to jobs."""

    def test_empty_filter_matches_everything(self):
        """Test the empty filter keeps any job."""
        assert JobFilter().matches(make_job(salary=None, equity=None))

    def test_title_case_insensitive(self):
        """Test title matching ignores case."""
        assert JobFilter(title="ENG").matches(make_job(title="Senior Engineer"))
        assert not JobFilter(title="doc").matches(make_job(title="engineer"))

    def test_min_salary_strictly_greater(self):
        """Test the minimum salary itself does not pass."""
        assert JobFilter(min_salary=79999).matches(make_job(salary=80000))
        assert not JobFilter(min_salary=80000).matches(make_job(salary=80000))
        assert not JobFilter(min_salary=0).matches(make_job(salary=None))

    def test_fractional_min_salary(self):
        """Test a fractional bound compares numerically."""
        job_filter = JobFilter(min_salary=Decimal("90000.5"))

        assert job_filter.matches(make_job(salary=100000))
        assert not job_filter.matches(make_job(salary=90000))

    def test_has_equity(self):
        """Test zero or missing equity fails the equity filter."""
        assert JobFilter(has_equity=True).matches(make_job(equity="0.01"))
        assert not JobFilter(has_equity=True).matches(make_job(equity="0"))
        assert not JobFilter(has_equity=True).matches(make_job(equity=None))

    def test_predicates_combine_with_and(self):
        """Test every set predicate must hold."""
        job_filter = JobFilter(title="eng", min_salary=50000, has_equity=True)

        assert job_filter.matches(make_job(equity="0.2"))
        assert not job_filter.matches(make_job(equity="0"))
        assert not job_filter.matches(make_job(salary=40000, equity="0.2"))
