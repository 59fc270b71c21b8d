"""
Read-only resume repository contract.

The export pipeline only ever needs "fetch a fully populated Resume by id";
persistence beyond that is someone else's concern.
"""

from pathlib import Path

from typing_extensions import Protocol

from resumeflow.contexts.intake.json_resume_importer import IMPORTED_TITLE, load_json_resume
from resumeflow.contexts.intake.resume_data_structure import Resume


class ResumeRepository(Protocol):
    def get(self, resume_id: str) -> Resume:
        ...


class JsonResumeRepository:
    """
    Repository backed by a directory of JSON Resume files.

    A resume with id "jane" is read from <directory>/jane.json.
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def path_for(self, resume_id: str) -> Path:
        return self.directory / f"{resume_id}.json"

    def get(self, resume_id: str) -> Resume:
        """
        Load a resume by id.

        Raises:
            FileNotFoundError: If no file exists for the id
            ValueError: If the file is not a valid JSON Resume document
        """
        path = self.path_for(resume_id)
        if not path.is_file():
            raise FileNotFoundError(f"Resume '{resume_id}' not found at {path}")
        resume = load_json_resume(path)
        if resume.title == IMPORTED_TITLE:
            resume.title = resume_id
        return resume

    def list_ids(self) -> list[str]:
        if not self.directory.is_dir():
            return []
        return sorted(path.stem for path in self.directory.glob("*.json"))
