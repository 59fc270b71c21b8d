"""Unit tests for the Resume aggregate helpers."""

from datetime import date

import pytest

from resumeflow.contexts.intake.resume_data_structure import (
    DEFAULT_SECTION_ORDER,
    Education,
    PersonalInfo,
    ResumeSettings,
    WorkExperience,
    format_date_range,
    split_lines,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "start, end, current, expected",
    [
        (date(2020, 1, 15), date(2022, 6, 1), False, "1/2020 - 6/2022"),
        (date(2020, 1, 15), None, True, "1/2020 - Present"),
        (date(2020, 1, 15), date(2022, 6, 1), True, "1/2020 - Present"),
        (date(2020, 11, 1), None, False, "11/2020"),
        (None, date(2022, 6, 1), False, ""),
        (None, None, True, ""),
    ],
)
def test_format_date_range(start, end, current, expected):
    """Test date range formatting, including omitted ranges without a start."""
    assert format_date_range(start, end, current) == expected


@pytest.mark.unit
def test_formatted_gpa():
    """Test GPA uses two decimals and a one-decimal scale."""
    assert Education(gpa=3.8).formatted_gpa == "3.80 / 4.0"
    assert Education(gpa=88.5, gpa_scale=100).formatted_gpa == "88.50 / 100.0"
    assert Education().formatted_gpa == ""


@pytest.mark.unit
def test_split_lines_drops_blank_lines():
    """Test multi-line text splits into stripped, non-blank items."""
    assert split_lines("First\n\n  Second  \n") == ["First", "Second"]
    assert split_lines(None) == []


@pytest.mark.unit
def test_work_experience_bullets_combine_responsibilities_and_achievements():
    """Test responsibilities come before achievements."""
    experience = WorkExperience(responsibilities="Built APIs\nOn call", achievements="Award")
    assert experience.bullets == ["Built APIs", "On call", "Award"]


@pytest.mark.unit
def test_personal_info_helpers():
    """Test full name, address and links skip absent parts."""
    info = PersonalInfo(
        first_name="Jane",
        city="Portland",
        state="OR",
        github_url="https://github.com/jane",
        website_url="https://jane.dev",
    )
    assert info.full_name == "Jane"
    assert info.full_address == "Portland, OR"
    assert info.links == ["GitHub: https://github.com/jane", "Portfolio: https://jane.dev"]


@pytest.mark.unit
def test_section_order_list():
    """Test section order parsing and fallback to the default order."""
    assert ResumeSettings(section_order=" Skills , experience,,").section_order_list() == ["skills", "experience"]
    assert ResumeSettings(section_order="").section_order_list() == DEFAULT_SECTION_ORDER.split(",")
    assert ResumeSettings(section_order=None).section_order_list() == DEFAULT_SECTION_ORDER.split(",")
