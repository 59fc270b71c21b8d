"""
Section adapter: flattens a Resume into the ordered Section list the layout
engine consumes.

Section order and inclusion come from ResumeSettings.section_order. Absent
fields are omitted from their block, and sections left without content are
dropped entirely.
"""

import warnings as warnings_module
from typing import Callable, Optional

from resumeflow.contexts.intake.resume_data_structure import (
    SECTION_KEYS,
    ContentType,
    Education,
    Project,
    Resume,
    ResumeSettings,
    WorkExperience,
    split_lines,
)
from resumeflow.contexts.layout.layout_data_structures import (
    BulletList,
    Heading,
    KeyValueRow,
    LabeledLine,
    Paragraph,
    Section,
    Spacer,
    TextBlock,
)
from resumeflow.contexts.templating.style_data_structures import FontRole, StyleParams

SECTION_HEADINGS = {
    "summary": "PROFESSIONAL SUMMARY",
    "experience": "WORK EXPERIENCE",
    "education": "EDUCATION",
    "skills": "SKILLS",
    "projects": "PROJECTS",
}

UNCATEGORIZED_SKILLS = "Other"


def _clean(value: Optional[str]) -> str:
    return value.strip() if value else ""


def _join(parts: list, separator: str = " | ") -> str:
    return separator.join(part.strip() for part in parts if part and part.strip())


def _with_spacing(entries: list[list[TextBlock]], spacing: float) -> list[TextBlock]:
    """Concatenate non-empty entries with a Spacer between consecutive ones."""
    blocks: list[TextBlock] = []
    for entry in entries:
        if not entry:
            continue
        if blocks:
            blocks.append(Spacer(spacing))
        blocks.extend(entry)
    return blocks


# ============================================================================
# Per-section builders
# ============================================================================


def build_personal_section(resume: Resume, style: StyleParams) -> list[Section]:
    info = resume.personal_info
    if info is None:
        return []

    blocks: list[TextBlock] = []
    if info.full_name:
        blocks.append(Heading(info.full_name, role=FontRole.TITLE))

    contact = _join([info.email, info.phone, info.full_address])
    if contact:
        blocks.append(Paragraph(contact))

    links = _join(info.links)
    if links:
        blocks.append(Paragraph(links))

    return [Section(heading=None, blocks=blocks)] if blocks else []


def build_summary_section(resume: Resume, style: StyleParams) -> list[Section]:
    summary = _clean(resume.professional_summary)
    if not summary:
        return []
    return [Section(SECTION_HEADINGS["summary"], [Paragraph(summary)])]


def _experience_blocks(experience: WorkExperience) -> list[TextBlock]:
    blocks: list[TextBlock] = []

    headline = _join([experience.job_title, experience.company], " - ")
    if headline or experience.date_range:
        blocks.append(KeyValueRow(headline, experience.date_range))
    if _clean(experience.location):
        blocks.append(Paragraph(_clean(experience.location), role=FontRole.META))
    if _clean(experience.description):
        blocks.append(Paragraph(_clean(experience.description)))
    if experience.bullets:
        blocks.append(BulletList(experience.bullets))

    return blocks


def build_experience_section(resume: Resume, style: StyleParams) -> list[Section]:
    ordered = sorted(resume.work_experiences, key=lambda e: e.display_order)
    blocks = _with_spacing([_experience_blocks(e) for e in ordered], style.entry_spacing)
    return [Section(SECTION_HEADINGS["experience"], blocks)] if blocks else []


def _education_headline(education: Education) -> str:
    degree = _clean(education.degree)
    field = _clean(education.field_of_study)
    if degree and field:
        return f"{degree} in {field}"
    return degree or field


def _education_blocks(education: Education) -> list[TextBlock]:
    blocks: list[TextBlock] = []

    headline = _education_headline(education)
    if headline or education.date_range:
        blocks.append(KeyValueRow(headline, education.date_range))

    institution = _join([education.institution, education.location], ", ")
    if institution:
        blocks.append(Paragraph(institution))
    if education.formatted_gpa:
        blocks.append(Paragraph(f"GPA: {education.formatted_gpa}", role=FontRole.META))
    if _clean(education.description):
        blocks.append(Paragraph(_clean(education.description)))

    achievements = split_lines(education.achievements)
    if achievements:
        blocks.append(Paragraph("; ".join(achievements)))

    return blocks


def build_education_section(resume: Resume, style: StyleParams) -> list[Section]:
    ordered = sorted(resume.educations, key=lambda e: e.display_order)
    blocks = _with_spacing([_education_blocks(e) for e in ordered], style.entry_spacing)
    return [Section(SECTION_HEADINGS["education"], blocks)] if blocks else []


def build_skills_section(resume: Resume, style: StyleParams) -> list[Section]:
    visible = [skill for skill in resume.skills if skill.visible and _clean(skill.name)]
    visible.sort(key=lambda s: s.display_order)

    # Group by category, preserving first-appearance order
    groups: dict[str, list[str]] = {}
    for skill in visible:
        category = _clean(skill.category) or UNCATEGORIZED_SKILLS
        groups.setdefault(category, []).append(_clean(skill.name))

    blocks = [LabeledLine(f"{category}:", ", ".join(names)) for category, names in groups.items()]
    return [Section(SECTION_HEADINGS["skills"], blocks)] if blocks else []


def _project_blocks(project: Project) -> list[TextBlock]:
    blocks: list[TextBlock] = []

    if _clean(project.name) or project.date_range:
        blocks.append(KeyValueRow(_clean(project.name), project.date_range))
    if _clean(project.technologies):
        blocks.append(LabeledLine("Technologies:", _clean(project.technologies)))
    if _clean(project.description):
        blocks.append(Paragraph(_clean(project.description)))
    if project.highlight_bullets:
        blocks.append(BulletList(project.highlight_bullets))

    links = []
    if _clean(project.project_url):
        links.append(f"URL: {_clean(project.project_url)}")
    if _clean(project.github_url):
        links.append(f"GitHub: {_clean(project.github_url)}")
    if links:
        blocks.append(Paragraph(_join(links), role=FontRole.META))

    return blocks


def build_projects_section(resume: Resume, style: StyleParams) -> list[Section]:
    ordered = sorted(resume.projects, key=lambda p: p.display_order)
    blocks = _with_spacing([_project_blocks(p) for p in ordered], style.entry_spacing)
    return [Section(SECTION_HEADINGS["projects"], blocks)] if blocks else []


def build_custom_sections(resume: Resume, style: StyleParams) -> list[Section]:
    sections = []
    visible = [custom for custom in resume.custom_sections if custom.visible]
    for custom in sorted(visible, key=lambda c: c.display_order):
        if custom.content_type == ContentType.BULLET_LIST:
            lines = custom.content_lines
            blocks = [BulletList(lines)] if lines else []
        else:
            content = _clean(custom.content)
            blocks = [Paragraph(content)] if content else []

        if blocks:
            title = _clean(custom.section_title).upper()
            sections.append(Section(title or None, blocks))
    return sections


SECTION_BUILDERS: dict[str, Callable[[Resume, StyleParams], list[Section]]] = {
    "personal": build_personal_section,
    "summary": build_summary_section,
    "experience": build_experience_section,
    "education": build_education_section,
    "skills": build_skills_section,
    "projects": build_projects_section,
    "custom": build_custom_sections,
}


def build_sections(
    resume: Resume,
    style: StyleParams,
    settings: Optional[ResumeSettings] = None,
) -> list[Section]:
    """
    Flatten a Resume into layout Sections in display order.

    Args:
        resume: Resume aggregate
        style: Resolved style (entry spacing is read from it)
        settings: Settings controlling section order; defaults to resume.settings

    Returns:
        Ordered Sections, omitting any that would be empty
    """
    if settings is None:
        settings = resume.settings or ResumeSettings()

    sections: list[Section] = []
    seen = set()
    for key in settings.section_order_list():
        if key not in SECTION_BUILDERS:
            warnings_module.warn(
                f"Skipping unknown section '{key}'. Known sections: {', '.join(SECTION_KEYS)}",
                UserWarning,
                stacklevel=2,
            )
            continue
        if key in seen:
            continue
        seen.add(key)
        sections.extend(SECTION_BUILDERS[key](resume, style))

    return sections
