"""
Resume aggregate for the Intake context.

Plain dataclasses with no back-references: a Resume owns its entries and the
entries know nothing about the Resume. The Section adapter reads this aggregate;
the layout engine never sees it.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional

DEFAULT_SECTION_ORDER = "personal,summary,experience,education,skills,projects,custom"
SECTION_KEYS = DEFAULT_SECTION_ORDER.split(",")

DEFAULT_GPA_SCALE = 4.0


def format_month_year(value: date) -> str:
    """Format a date as M/YYYY (e.g. 3/2021)."""
    return f"{value.month}/{value.year}"


def format_date_range(start: Optional[date], end: Optional[date], current: bool = False) -> str:
    """
    Format an entry's date range.

    Examples:
        >>> format_date_range(date(2020, 1, 1), date(2022, 6, 1))
        '1/2020 - 6/2022'
        >>> format_date_range(date(2020, 1, 1), None, current=True)
        '1/2020 - Present'
        >>> format_date_range(None, date(2022, 6, 1))
        ''
    """
    if start is None:
        return ""
    if current:
        return f"{format_month_year(start)} - Present"
    if end is None:
        return format_month_year(start)
    return f"{format_month_year(start)} - {format_month_year(end)}"


def split_lines(text: Optional[str]) -> list[str]:
    """Split multi-line text into stripped, non-blank items."""
    if not text:
        return []
    return [line.strip() for line in text.split("\n") if line.strip()]


class ProficiencyLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"
    EXPERT = "Expert"


class ContentType(str, Enum):
    TEXT = "TEXT"
    BULLET_LIST = "BULLET_LIST"
    TABLE = "TABLE"
    CUSTOM = "CUSTOM"


@dataclass
class PersonalInfo:
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    linkedin_url: Optional[str] = None
    github_url: Optional[str] = None
    portfolio_url: Optional[str] = None
    website_url: Optional[str] = None

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part and part.strip())

    @property
    def full_address(self) -> str:
        parts = [self.address, self.city, self.state, self.zip_code, self.country]
        return ", ".join(part.strip() for part in parts if part and part.strip())

    @property
    def links(self) -> list[str]:
        """Labeled profile links in display order, absent ones omitted."""
        labeled = [
            ("LinkedIn", self.linkedin_url),
            ("GitHub", self.github_url),
            ("Portfolio", self.portfolio_url or self.website_url),
        ]
        return [f"{label}: {url.strip()}" for label, url in labeled if url and url.strip()]


@dataclass
class WorkExperience:
    job_title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    current: bool = False
    description: Optional[str] = None
    responsibilities: Optional[str] = None
    achievements: Optional[str] = None
    display_order: int = 0

    @property
    def date_range(self) -> str:
        return format_date_range(self.start_date, self.end_date, self.current)

    @property
    def bullets(self) -> list[str]:
        return split_lines(self.responsibilities) + split_lines(self.achievements)


@dataclass
class Education:
    degree: Optional[str] = None
    field_of_study: Optional[str] = None
    institution: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    current: bool = False
    gpa: Optional[float] = None
    gpa_scale: float = DEFAULT_GPA_SCALE
    description: Optional[str] = None
    achievements: Optional[str] = None
    display_order: int = 0

    @property
    def date_range(self) -> str:
        return format_date_range(self.start_date, self.end_date, self.current)

    @property
    def formatted_gpa(self) -> str:
        """GPA as '3.80 / 4.0', or empty when no GPA is recorded."""
        if self.gpa is None:
            return ""
        scale = self.gpa_scale if self.gpa_scale is not None else DEFAULT_GPA_SCALE
        return f"{self.gpa:.2f} / {scale:.1f}"


@dataclass
class Skill:
    name: str
    category: Optional[str] = None
    proficiency_level: Optional[ProficiencyLevel] = None
    display_order: int = 0
    visible: bool = True


@dataclass
class Project:
    name: Optional[str] = None
    description: Optional[str] = None
    technologies: Optional[str] = None
    project_url: Optional[str] = None
    github_url: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    current: bool = False
    highlights: Optional[str] = None
    role: Optional[str] = None
    display_order: int = 0

    @property
    def date_range(self) -> str:
        return format_date_range(self.start_date, self.end_date, self.current)

    @property
    def highlight_bullets(self) -> list[str]:
        return split_lines(self.highlights)


@dataclass
class CustomSection:
    section_title: str
    content: Optional[str] = None
    content_type: ContentType = ContentType.TEXT
    display_order: int = 0
    visible: bool = True

    @property
    def content_lines(self) -> list[str]:
        return split_lines(self.content)


@dataclass
class ResumeSettings:
    """
    Per-resume display settings.

    Style fields default to None, meaning "keep the template's value".
    """

    section_order: Optional[str] = DEFAULT_SECTION_ORDER
    font_family: Optional[str] = None
    font_size: Optional[float] = None
    line_spacing: Optional[float] = None
    margin_top: Optional[float] = None
    margin_bottom: Optional[float] = None
    margin_left: Optional[float] = None
    margin_right: Optional[float] = None
    page_size: str = "letter"
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None

    def section_order_list(self) -> list[str]:
        """Section keys in display order; empty or missing order falls back to the default."""
        keys = [key.strip().lower() for key in (self.section_order or "").split(",") if key.strip()]
        return keys or list(SECTION_KEYS)


@dataclass
class Resume:
    title: str = "Untitled Resume"
    template_name: str = "professional"
    personal_info: Optional[PersonalInfo] = None
    professional_summary: Optional[str] = None
    work_experiences: list[WorkExperience] = field(default_factory=list)
    educations: list[Education] = field(default_factory=list)
    skills: list[Skill] = field(default_factory=list)
    projects: list[Project] = field(default_factory=list)
    custom_sections: list[CustomSection] = field(default_factory=list)
    settings: ResumeSettings = field(default_factory=ResumeSettings)
