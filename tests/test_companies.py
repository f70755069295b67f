from __future__ import annotations

from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from exercises import companies as q
from exercises.sample_data import build_companies


def _names(rows):
    return [c.name for c in rows]


@pytest.fixture
def companies():
    return build_companies()


def test_name_containment_case_variants(companies):
    assert _names(q.get_companies_with_name_containing(companies, "Food")) == ["FoodMarket", "Foodies Delivery"]
    assert q.get_companies_with_name_containing(companies, "bank") == []
    assert _names(q.get_companies_with_name_containing_ignore_case(companies, "bank")) == ["Global Bank Ltd"]


def test_profile_and_headcount(companies):
    assert _names(q.get_companies_by_profile(companies, "Marketing")) == ["Marketing Pro"]
    assert _names(q.get_companies_with_more_employees_than(companies, 100)) == [
        "Global Bank Ltd",
        "Tech Solutions",
        "BlueSky IT",
    ]
    assert _names(q.get_companies_with_employees_in_range(companies, 85, 150)) == [
        "Tech Solutions",
        "Foodies Delivery",
    ]


def test_city_and_compound(companies):
    assert _names(q.get_companies_in_city(companies, "London")) == [
        "Global Bank Ltd",
        "FoodMarket",
        "Marketing Pro",
        "BlueSky IT",
    ]
    assert _names(q.get_companies_in_city_with_profile(companies, "London", "IT")) == ["BlueSky IT"]
    assert q.get_companies_in_city_with_profile(companies, "Manchester", "Retail") == []


def test_director_last_name_ignores_case_and_partial_tokens(companies):
    assert _names(q.get_companies_by_director_last_name(companies, "WHITE")) == [
        "Global Bank Ltd",
        "Marketing Pro",
    ]


def test_founded_more_than_years_ago(companies, fixed_now):
    assert _names(q.get_companies_founded_more_than_years_ago(companies, 10, fixed_now)) == [
        "Global Bank Ltd",
        "FoodMarket",
        "Tech Solutions",
        "BlueSky IT",
    ]


def test_founded_days_ago_only_matches_exact_timestamp(companies):
    founded = datetime(2021, 6, 15)
    assert _names(q.get_companies_founded_days_ago(companies, 10, founded + timedelta(days=10))) == [
        "Foodies Delivery"
    ]
    # An hour later on the same day no longer matches
    later = founded + timedelta(days=10, hours=1)
    assert q.get_companies_founded_days_ago(companies, 10, later) == []


def test_sorted_by_employee_count(companies):
    counts = [c.employee_count for c in q.get_companies_sorted_by_employee_count(companies, descending=True)]
    assert counts == [320, 210, 150, 85, 45, 30]


def test_records_are_frozen(companies):
    with pytest.raises(ValidationError):
        companies[0].name = "Changed"


def test_exercise_logs_empty_exact_day_match(fixed_now, caplog):
    import logging

    with caplog.at_level(logging.INFO, logger="exercises.companies"):
        sections = q.CompaniesExercise().run(fixed_now)
    titles = [s.title for s in sections]
    assert "Companies founded exactly 30 days ago:" in titles
    assert any("no company founded exactly" in r.getMessage() for r in caplog.records)
    first_line = sections[0].lines[0]
    assert first_line.startswith("Name: Global Bank Ltd, Founded: 1995-04-12, Profile: Finance")


def test_company_names_projection(companies, fixed_now):
    assert q.get_company_names(companies) == [
        "Global Bank Ltd",
        "FoodMarket",
        "Tech Solutions",
        "Marketing Pro",
        "Foodies Delivery",
        "BlueSky IT",
    ]
    sections = q.CompaniesExercise().run(fixed_now)
    assert sections[1].title == "Company names:"
    assert sections[1].lines == (
        "Global Bank Ltd, FoodMarket, Tech Solutions, Marketing Pro, Foodies Delivery, BlueSky IT",
    )
