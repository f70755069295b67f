from __future__ import annotations

from exercises import cities as q
from exercises.sample_data import build_cities


def test_all_cities_is_a_copy():
    data = build_cities()
    out = q.get_all_cities(data)
    assert out == data and out is not data


def test_no_sample_city_has_ten_characters():
    # Los Angeles and San Antonio have 11, Philadelphia 12
    assert q.get_cities_by_length(build_cities(), 10) == []


def test_length_filter_matches_exact_count():
    assert q.get_cities_by_length(build_cities(), 7) == ["Chicago", "Houston", "Phoenix"]


def test_uppercase_letter_queries_are_case_sensitive():
    data = build_cities()
    assert q.get_cities_start_with_a(data) == []
    assert q.get_cities_end_with_m(data) == []
    assert q.get_cities_start_with_n_end_with_k(data) == []
    assert q.get_cities_start_with_n_end_with_k(["NorK", "New York"]) == ["NorK"]


def test_ne_prefix_sorted_descending():
    assert q.get_cities_start_with_ne_descending(build_cities()) == ["New York"]
    data = ["Newark", "Nevada", "New Orleans", "Boston"]
    assert q.get_cities_start_with_ne_descending(data) == ["Newark", "New Orleans", "Nevada"]


def test_exercise_sections_follow_transcript_headers(fixed_now):
    sections = q.CitiesExercise().run(fixed_now)
    assert sections[0].title == "All cities:"
    assert sections[0].lines == (
        "New York, Los Angeles, Chicago, Houston, Phoenix, Philadelphia, San Antonio, San Diego",
    )
    assert sections[1].title == "Cities with name length equal to 10:"
    assert sections[1].lines == ("",)
    assert sections[-1].lines == ("New York",)
