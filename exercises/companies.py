"""Company queries: name/profile/address matching, headcount and founding date."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Sequence

from config.settings import get_settings
from engine import QueryEngine, run_query
from engine import predicates as p
from models import CompanyRecord
from services.reporting import Section, format_company, values_section

from .sample_data import build_companies


logger = logging.getLogger(__name__)


def _name(company: CompanyRecord) -> str:
    return company.name


def _profile(company: CompanyRecord) -> str:
    return company.business_profile


def _address(company: CompanyRecord) -> str:
    return company.address


def _director(company: CompanyRecord) -> str:
    return company.director_full_name


def _headcount(company: CompanyRecord) -> int:
    return company.employee_count


def _founded(company: CompanyRecord) -> datetime:
    return company.founding_date


def get_all_companies(companies: Sequence[CompanyRecord]) -> List[CompanyRecord]:
    return list(companies)


def get_company_names(companies: Sequence[CompanyRecord]) -> List[str]:
    return QueryEngine(companies, name="company_names").select(_name).to_list()


def get_companies_with_name_containing(companies: Sequence[CompanyRecord], text: str) -> List[CompanyRecord]:
    return run_query(companies, p.contains(text, _name), name="companies_name_contains")


def get_companies_with_name_containing_ignore_case(
    companies: Sequence[CompanyRecord], text: str
) -> List[CompanyRecord]:
    return run_query(companies, p.contains(text, _name, ignore_case=True), name="companies_name_contains_ci")


def get_companies_by_profile(companies: Sequence[CompanyRecord], profile: str) -> List[CompanyRecord]:
    return run_query(companies, p.equals(profile, _profile), name="companies_by_profile")


def get_companies_with_more_employees_than(companies: Sequence[CompanyRecord], count: int) -> List[CompanyRecord]:
    return run_query(companies, p.greater_than(count, _headcount), name="companies_more_employees")


def get_companies_with_employees_in_range(
    companies: Sequence[CompanyRecord], low: int, high: int
) -> List[CompanyRecord]:
    return run_query(companies, p.in_range(low, high, _headcount), name="companies_employees_in_range")


def get_companies_in_city(companies: Sequence[CompanyRecord], city: str) -> List[CompanyRecord]:
    """Companies whose address mentions ``city`` (case-sensitive)."""
    return run_query(companies, p.contains(city, _address), name="companies_in_city")


def get_companies_in_city_with_profile(
    companies: Sequence[CompanyRecord], city: str, profile: str
) -> List[CompanyRecord]:
    return run_query(
        companies,
        p.all_of(p.contains(city, _address), p.equals(profile, _profile)),
        name="companies_in_city_with_profile",
    )


def get_companies_by_director_last_name(companies: Sequence[CompanyRecord], surname: str) -> List[CompanyRecord]:
    return run_query(companies, p.last_name_equals(surname, _director), name="companies_by_director")


def get_companies_founded_more_than_years_ago(
    companies: Sequence[CompanyRecord], years: int, now: datetime
) -> List[CompanyRecord]:
    return run_query(
        companies,
        p.founded_more_than_years_ago(years, now, _founded),
        name="companies_founded_years_ago",
    )


def get_companies_founded_days_ago(
    companies: Sequence[CompanyRecord], days: int, now: datetime
) -> List[CompanyRecord]:
    """Companies founded exactly ``days`` before ``now``, to the microsecond."""
    return run_query(companies, p.founded_days_ago(days, now, _founded), name="companies_founded_days_ago")


def get_companies_sorted_by_employee_count(
    companies: Sequence[CompanyRecord], descending: bool = False
) -> List[CompanyRecord]:
    return run_query(companies, key=_headcount, descending=descending, name="companies_by_headcount")


class CompaniesExercise:
    exercise_name = "companies"
    title = "Company queries"

    def run(self, now: datetime) -> List[Section]:
        settings = get_settings()
        companies = build_companies()
        years = settings.demo_years_ago
        days = settings.demo_days_ago
        founded_days_ago = get_companies_founded_days_ago(companies, days, now)
        if not founded_days_ago:
            logger.info(
                "no company founded exactly %s days before %s",
                days,
                now.isoformat(),
                extra={"exercise": self.exercise_name},
            )

        def section(title: str, rows: List[CompanyRecord]) -> Section:
            return Section(title, tuple(format_company(c) for c in rows))

        return [
            section("All companies:", get_all_companies(companies)),
            values_section("Company names:", get_company_names(companies)),
            section("Companies with 'Food' in the name:", get_companies_with_name_containing(companies, "Food")),
            section(
                "Companies with 'bank' in the name (any case):",
                get_companies_with_name_containing_ignore_case(companies, "bank"),
            ),
            section("Companies working in marketing:", get_companies_by_profile(companies, "Marketing")),
            section("Companies with more than 100 employees:", get_companies_with_more_employees_than(companies, 100)),
            section(
                "Companies with 50 to 200 employees:",
                get_companies_with_employees_in_range(companies, 50, 200),
            ),
            section("Companies located in London:", get_companies_in_city(companies, "London")),
            section(
                "IT companies located in London:",
                get_companies_in_city_with_profile(companies, "London", "IT"),
            ),
            section("Companies whose director is named White:", get_companies_by_director_last_name(companies, "White")),
            section(
                f"Companies founded more than {years} years ago:",
                get_companies_founded_more_than_years_ago(companies, years, now),
            ),
            section(f"Companies founded exactly {days} days ago:", founded_days_ago),
            section(
                "Companies by employee count, largest first:",
                get_companies_sorted_by_employee_count(companies, descending=True),
            ),
        ]
