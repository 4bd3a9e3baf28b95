import re
import logging
from typing import List

from .models import CertificationEntry, ExtractionContext

logger = logging.getLogger(__name__)

CERTIFICATION_HEADER = re.compile(r'^(?:CERTIFICATIONS?|CERTIFICATS?)', re.IGNORECASE)
BULLET = re.compile(r'^[-•]\s*')
# Degrees listed under certifications belong to the education section
EDUCATION_START = re.compile(
    r'^(?:BACHELOR|MASTER|ENGINEER|INGÉNIEUR|LICENCE|DEGREE|DIPLOMA|UNIVERSITY|UNIVERSITÉ)',
    re.IGNORECASE,
)
TRAILING_YEAR = re.compile(r'(\d{4})(?!.*\d{4})')


def _split_year(cert: str):
    match = TRAILING_YEAR.search(cert)
    if not match:
        return cert, None
    name = cert[:match.start()] + cert[match.end():]
    name = re.sub(r'\(\s*\)', '', name)
    return name.strip(' ,-–—:'), match.group(1)


def extract_certifications(context: ExtractionContext) -> List[CertificationEntry]:
    logger.info("[ADVANCED] Extracting certifications")

    section = context.section('certifications')
    if section is None:
        logger.debug("[CERTIFICATIONS] No certification section found")
        return []

    certifications = []
    for line in section.lines:
        if CERTIFICATION_HEADER.match(line) or not BULLET.match(line):
            continue

        cert = BULLET.sub('', line).strip()
        if EDUCATION_START.match(cert):
            continue

        if 3 < len(cert) < 300:
            name, year = _split_year(cert)
            certifications.append(CertificationEntry(name=name, issuer='', date=year))
            logger.debug(f"[CERTIFICATION] Found: {cert}")

    return certifications
