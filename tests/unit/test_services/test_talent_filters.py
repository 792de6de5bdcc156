"""Tests for directory filtering."""

import pytest
from src.models.talent import AdvancedFilters, TalentCategory
from src.services.talent_filters import (
    DirectoryView,
    filter_talents,
    matches_advanced,
    matches_category,
)
from tests.utils.factories import create_talent


@pytest.fixture
def roster():
    return [
        create_talent(gender="Male", age=20, height_cm=180, location="Mumbai"),
        create_talent(gender="Male", age=16, height_cm=190, location="Delhi"),
        create_talent(gender="Female", age=15, height_cm=168, location="Pune, Maharashtra"),
        create_talent(gender="Female", age=14, height_cm=150, location="Mumbai"),
        create_talent(gender="Other", age=30, height_cm=175, location="Goa"),
        create_talent(gender="Male", age=9, height_cm=130, location="Chennai"),
    ]


@pytest.mark.unit
def test_category_all_is_unconstrained(roster):
    """Test All returns every talent in input order."""
    assert filter_talents(roster, "All") == roster


@pytest.mark.unit
def test_category_rules(roster):
    """Test Male/Female require age 15+, Kids is under 15."""
    assert [t.age for t in filter_talents(roster, TalentCategory.MALE)] == [20, 16]
    assert [t.age for t in filter_talents(roster, TalentCategory.FEMALE)] == [15]
    assert [t.age for t in filter_talents(roster, TalentCategory.KIDS)] == [14, 9]


@pytest.mark.unit
def test_other_gender_excluded_from_male_and_female(roster):
    """Test adult Other appears only under All."""
    other = roster[4]
    assert not matches_category(other, "Male")
    assert not matches_category(other, "Female")
    assert not matches_category(other, "Kids")
    assert matches_category(other, "All")


@pytest.mark.unit
def test_category_and_advanced_are_combined(roster):
    """Test Male plus min height 185 returns only the 190 cm talent."""
    result = filter_talents(roster[:2], "Male", advanced_active=True, filters=AdvancedFilters(min_height=185))

    assert result == [roster[1]]


@pytest.mark.unit
def test_advanced_ignored_when_panel_closed(roster):
    """Test advanced values have no effect while the panel is closed."""
    filters = AdvancedFilters(location="nowhere", min_height=250)

    assert filter_talents(roster, "All", advanced_active=False, filters=filters) == roster


@pytest.mark.unit
def test_location_substring_case_insensitive(roster):
    """Test location matching ignores case."""
    result = filter_talents(roster, "All", True, AdvancedFilters(location="MUMBAI"))

    assert [t.location for t in result] == ["Mumbai", "Mumbai"]


@pytest.mark.unit
def test_age_range_inclusive(roster):
    """Test both age bounds are inclusive."""
    result = filter_talents(roster, "All", True, AdvancedFilters(min_age=15, max_age=20))

    assert sorted(t.age for t in result) == [15, 16, 20]


@pytest.mark.unit
def test_gender_filter(roster):
    """Test gender All is a no-op and other values match exactly."""
    assert len(filter_talents(roster, "All", True, AdvancedFilters(gender="All"))) == len(roster)
    assert [t.gender for t in filter_talents(roster, "All", True, AdvancedFilters(gender="Other"))] == ["Other"]


@pytest.mark.unit
def test_min_height_zero_is_no_constraint(roster):
    """Test min height 0 disables the height rule."""
    talent = roster[5]
    assert matches_advanced(talent, AdvancedFilters(min_height=0))
    assert not matches_advanced(talent, AdvancedFilters(min_height=131))
    assert matches_advanced(talent, AdvancedFilters(min_height=130))


@pytest.mark.unit
def test_opening_advanced_resets_category(roster):
    """Test toggling the panel open switches the category pill to All."""
    view = DirectoryView()
    view.select_category("Kids")

    assert view.toggle_advanced() is True
    assert view.category == TalentCategory.ALL

    view.select_category("Male")
    assert view.toggle_advanced() is False
    assert view.category == TalentCategory.MALE


@pytest.mark.unit
def test_directory_view_apply(roster):
    """Test the view applies its own state."""
    view = DirectoryView()
    view.toggle_advanced()
    view.filters = AdvancedFilters(min_height=175)
    view.select_category("Male")

    assert [t.height_cm for t in view.apply(roster)] == [180, 190]
