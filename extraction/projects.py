import re
import logging
from typing import List, Optional

from .models import ExtractionContext, ProjectEntry

logger = logging.getLogger(__name__)

PROJECT_HEADER = re.compile(r'^(?:PROJETS?|PROJECTS?)', re.IGNORECASE)
BARE_YEAR = re.compile(r'(?<!\d)(\d{4})(?!\d)')
BULLET = re.compile(r'^[-•]\s*')


class _ProjectBuilder:
    """Accumulates the project currently being read."""

    def __init__(self, name: str, date: Optional[str]):
        self.name = name
        self.date = date
        self.description: List[str] = []

    def build(self) -> ProjectEntry:
        return ProjectEntry(name=self.name, description=' '.join(self.description), date=self.date)


def extract_projects(context: ExtractionContext) -> List[ProjectEntry]:
    """Projects of the projects section; a line carrying a year opens a new one."""
    logger.info("[ADVANCED] Extracting projects")

    section = context.section('projects')
    if section is None:
        logger.debug("[PROJECTS] No project section found")
        return []

    projects = []
    current = None

    for line in section.lines:
        if PROJECT_HEADER.match(line):
            continue

        year = BARE_YEAR.search(line)
        if year:
            if current is not None and current.name:
                projects.append(current.build())
            name = BULLET.sub('', BARE_YEAR.sub('', line, count=1).strip()).strip(' ,-–—:|')
            current = _ProjectBuilder(name, year.group(1))
        elif current is not None:
            # A year alone on its line names the project with the next plain line
            if not current.name and not BULLET.match(line):
                current.name = line
            else:
                current.description.append(BULLET.sub('', line).strip())

    if current is not None and current.name:
        projects.append(current.build())

    logger.info(f"[PROJECTS] Found {len(projects)} projects")
    return projects
