from __future__ import annotations

from datetime import datetime
from typing import List, Sequence

from config.settings import get_settings
from engine import run_query
from engine import predicates as p
from services.reporting import Section, values_section

from .sample_data import build_cities


def get_all_cities(cities: Sequence[str]) -> List[str]:
    return list(cities)


def get_cities_by_length(cities: Sequence[str], length: int) -> List[str]:
    """Cities whose name has exactly ``length`` characters."""
    return run_query(cities, p.length_equals(length), name="cities_by_length")


def get_cities_start_with_a(cities: Sequence[str]) -> List[str]:
    return run_query(cities, p.starts_with("A"), name="cities_start_with_a")


def get_cities_end_with_m(cities: Sequence[str]) -> List[str]:
    return run_query(cities, p.ends_with("M"), name="cities_end_with_m")


def get_cities_start_with_n_end_with_k(cities: Sequence[str]) -> List[str]:
    # Case-sensitive: "New York" ends with a lowercase k
    return run_query(cities, p.starts_and_ends_with("N", "K"), name="cities_n_to_k")


def get_cities_start_with_ne_descending(cities: Sequence[str]) -> List[str]:
    return run_query(
        cities,
        p.starts_with("Ne"),
        key=lambda city: city,
        descending=True,
        name="cities_ne_descending",
    )


class CitiesExercise:
    exercise_name = "cities"
    title = "City name queries"

    def run(self, now: datetime) -> List[Section]:
        cities = build_cities()
        length = get_settings().demo_city_length
        return [
            values_section("All cities:", get_all_cities(cities)),
            values_section(f"Cities with name length equal to {length}:", get_cities_by_length(cities, length)),
            values_section("Cities starting with 'A':", get_cities_start_with_a(cities)),
            values_section("Cities ending with 'M':", get_cities_end_with_m(cities)),
            values_section("Cities starting with 'N' and ending with 'K':", get_cities_start_with_n_end_with_k(cities)),
            values_section("Cities starting with 'Ne' in descending order:", get_cities_start_with_ne_descending(cities)),
        ]
