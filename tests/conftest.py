"""Shared fixtures for resumeflow tests."""

import json
from dataclasses import replace

import pytest

from resumeflow.contexts.layout.font_metrics import MonospaceMetrics
from resumeflow.contexts.layout.layout_data_structures import PageGeometry
from resumeflow.contexts.templating.defaults import professional_style

SAMPLE_RESUME = {
    "basics": {
        "name": "Jane Q Doe",
        "email": "jane@example.com",
        "phone": "555-0100",
        "url": "https://jane.dev",
        "summary": "Backend engineer focused on reliable data systems.",
        "location": {"city": "Portland", "region": "OR", "countryCode": "US"},
        "profiles": [
            {"network": "LinkedIn", "url": "https://linkedin.com/in/jane"},
            {"network": "GitHub", "url": "https://github.com/jane"},
            {"network": "Mastodon", "url": "https://example.social/@jane"},
        ],
    },
    "work": [
        {
            "name": "Acme",
            "position": "Senior Engineer",
            "location": "Remote",
            "startDate": "2021-03-01",
            "endDate": "",
            "summary": "Owned the ingestion platform.",
            "highlights": ["Led team of 5", "Shipped v2"],
        },
        {
            "name": "Initech",
            "position": "Engineer",
            "startDate": "2018-06",
            "endDate": "2021-02",
            "highlights": ["Cut batch runtime by 40%"],
        },
    ],
    "education": [
        {
            "institution": "State University",
            "area": "Computer Science",
            "studyType": "BS",
            "startDate": "2014",
            "endDate": "2018",
            "score": "3.8",
        }
    ],
    "skills": [
        {"name": "Languages", "keywords": ["Python", "Go"]},
        {"keywords": ["Kubernetes"]},
    ],
    "projects": [
        {
            "name": "flowkit",
            "description": "A small stream processing toolkit.",
            "url": "https://example.com/flowkit",
            "keywords": ["Python", "asyncio"],
            "highlights": ["1k stars"],
            "startDate": "2020-01",
        }
    ],
}


@pytest.fixture
def mono():
    """Monospace metrics with 0.5 ratio: every character is 5pt wide at 10pt."""
    return MonospaceMetrics(char_width_ratio=0.5)


@pytest.fixture
def style():
    return professional_style()


@pytest.fixture
def small_page():
    """200x100pt page with 10pt margins: content box 180 wide, 80 tall (top_y=90, bottom_y=10)."""
    return PageGeometry(width=200, height=100, margin_top=10, margin_bottom=10, margin_left=10, margin_right=10)


@pytest.fixture
def tall_page():
    """200x400pt page with 10pt margins (top_y=390)."""
    return PageGeometry(width=200, height=400, margin_top=10, margin_bottom=10, margin_left=10, margin_right=10)


@pytest.fixture
def bullet_style(style):
    """Professional style with bullet indent 10 and hanging indent 5."""
    return replace(style, bullet_indent=10.0, hanging_indent=5.0)


@pytest.fixture
def sample_resume_dict():
    return json.loads(json.dumps(SAMPLE_RESUME))


@pytest.fixture
def resume_dir(tmp_path, sample_resume_dict):
    """Directory holding jane.json for repository tests."""
    (tmp_path / "jane.json").write_text(json.dumps(sample_resume_dict), encoding="utf-8")
    return tmp_path
