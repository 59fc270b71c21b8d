"""
JSON Resume importer.

Maps documents following the jsonresume.org schema onto the Resume aggregate.
Recoverable data problems (unparseable dates or scores) are dropped with a
UserWarning; a document that is not a JSON object raises ValueError.
"""

import json
import warnings as warnings_module
from datetime import date, datetime
from pathlib import Path
from typing import Any, Optional, Union

from resumeflow.contexts.intake.resume_data_structure import (
    Education,
    PersonalInfo,
    Project,
    Resume,
    ResumeSettings,
    Skill,
    WorkExperience,
)

IMPORTED_TITLE = "Imported Resume"

# Accepted date layouts, most specific first
DATE_FORMATS = ["%Y-%m-%d", "%Y-%m", "%Y"]


def parse_date(value: Any, field_name: str = "date") -> Optional[date]:
    """
    Parse a JSON Resume date (YYYY-MM-DD, YYYY-MM or YYYY).

    Returns None (with a UserWarning) when the value cannot be parsed.
    """
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    warnings_module.warn(f"Ignoring unparseable {field_name}: '{text}'", UserWarning, stacklevel=2)
    return None


def parse_end_date(value: Any, field_name: str = "endDate") -> tuple[Optional[date], bool]:
    """
    Parse an end date, treating empty and 'present' as an ongoing entry.

    Returns:
        (end date, current flag)
    """
    if value is None:
        return None, False
    text = str(value).strip()
    if not text or text.lower() == "present":
        return None, True
    return parse_date(text, field_name), False


def _text(node: dict, key: str) -> Optional[str]:
    value = node.get(key)
    if value is None:
        return None
    return str(value)


def _lines(values: Any) -> Optional[str]:
    """Join a JSON array of strings into newline-separated text."""
    if not values:
        return None
    return "\n".join(str(value) for value in values)


def _import_basics(basics: dict) -> PersonalInfo:
    info = PersonalInfo()

    name = _text(basics, "name")
    if name:
        parts = name.strip().split(" ", 1)
        info.first_name = parts[0]
        if len(parts) > 1:
            info.last_name = parts[1]

    info.email = _text(basics, "email")
    info.phone = _text(basics, "phone")
    info.website_url = _text(basics, "url")

    location = basics.get("location") or {}
    info.address = _text(location, "address")
    info.city = _text(location, "city")
    info.state = _text(location, "region")
    info.zip_code = _text(location, "postalCode")
    info.country = _text(location, "countryCode")

    for profile in basics.get("profiles") or []:
        network = (_text(profile, "network") or "").lower()
        url = _text(profile, "url")
        if network == "linkedin":
            info.linkedin_url = url
        elif network == "github":
            info.github_url = url

    return info


def _import_work(work_array: list) -> list[WorkExperience]:
    experiences = []
    for order, work in enumerate(work_array):
        end_date, current = parse_end_date(work.get("endDate"))
        experiences.append(
            WorkExperience(
                job_title=_text(work, "position"),
                company=_text(work, "name"),
                location=_text(work, "location"),
                start_date=parse_date(work.get("startDate"), "startDate"),
                end_date=end_date,
                current=current,
                description=_text(work, "summary"),
                responsibilities=_lines(work.get("highlights")),
                display_order=order,
            )
        )
    return experiences


def _parse_score(value: Any) -> Optional[float]:
    if value is None or str(value).strip() == "":
        return None
    try:
        return float(str(value).strip())
    except ValueError:
        warnings_module.warn(f"Ignoring non-numeric education score: '{value}'", UserWarning, stacklevel=2)
        return None


def _import_education(education_array: list) -> list[Education]:
    educations = []
    for order, edu in enumerate(education_array):
        end_date, current = parse_end_date(edu.get("endDate"))
        educations.append(
            Education(
                degree=_text(edu, "studyType"),
                field_of_study=_text(edu, "area"),
                institution=_text(edu, "institution"),
                start_date=parse_date(edu.get("startDate"), "startDate"),
                end_date=end_date,
                current=current,
                gpa=_parse_score(edu.get("score")),
                achievements=_lines(edu.get("courses")),
                display_order=order,
            )
        )
    return educations


def _import_skills(skills_array: list) -> list[Skill]:
    skills = []
    display_order = 0
    for group in skills_array:
        category = _text(group, "name") or "Other"
        for keyword in group.get("keywords") or []:
            skills.append(Skill(name=str(keyword), category=category, display_order=display_order))
            display_order += 1
    return skills


def _import_projects(projects_array: list) -> list[Project]:
    projects = []
    for order, proj in enumerate(projects_array):
        end_date, current = parse_end_date(proj.get("endDate"))
        keywords = proj.get("keywords") or []
        projects.append(
            Project(
                name=_text(proj, "name"),
                description=_text(proj, "description"),
                project_url=_text(proj, "url"),
                start_date=parse_date(proj.get("startDate"), "startDate"),
                end_date=end_date,
                current=current,
                technologies=", ".join(str(keyword) for keyword in keywords) or None,
                highlights=_lines(proj.get("highlights")),
                display_order=order,
            )
        )
    return projects


def import_json_resume(payload: Union[str, dict]) -> Resume:
    """
    Build a Resume from a JSON Resume document.

    Args:
        payload: JSON text or an already-decoded dict

    Returns:
        Resume with title "Imported Resume" and the professional template

    Raises:
        ValueError: If the text is not valid JSON or the root is not an object
    """
    if isinstance(payload, str):
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON Resume document: {e}") from e
    else:
        data = payload

    if not isinstance(data, dict):
        raise ValueError(f"JSON Resume root must be an object, got {type(data).__name__}")

    resume = Resume(title=IMPORTED_TITLE, template_name="professional", settings=ResumeSettings())

    basics = data.get("basics") or {}
    if basics:
        resume.personal_info = _import_basics(basics)

    summary = data.get("summary") or basics.get("summary")
    if summary:
        resume.professional_summary = str(summary)

    resume.work_experiences = _import_work(data.get("work") or [])
    resume.educations = _import_education(data.get("education") or [])
    resume.skills = _import_skills(data.get("skills") or [])
    resume.projects = _import_projects(data.get("projects") or [])

    return resume


def load_json_resume(path: Path) -> Resume:
    """Read and import a JSON Resume file."""
    path = Path(path)
    return import_json_resume(path.read_text(encoding="utf-8"))
