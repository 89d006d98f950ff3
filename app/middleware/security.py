import re

from validators import slug as validate_slug, uuid as validate_uuid
from validators.utils import ValidationError

_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f]')
_CACHE_PATTERN = re.compile(r'^[A-Za-z0-9_:\-.*]+$')


class Security:
    """Input checks for the admin endpoints.

    Behavior:
    - Record ids must be UUIDs or lowercase slugs (`u-1`, `cat-12`, cuid-style ids).
    - Search terms are stripped of control characters and capped in length.
    - Cache patterns may only use key characters plus the `*` wildcard.
    """

    MAX_SEARCH_LENGTH = 200

    def is_valid_record_id(self, record_id: str) -> bool:
        if not record_id or not isinstance(record_id, str):
            return False

        raw = record_id.strip()
        if not raw or len(raw) > 64:
            return False

        try:
            return validate_uuid(raw) is True or validate_slug(raw) is True
        except (ValidationError, UnicodeError):
            return False

    def clean_search_term(self, term: str) -> str:
        if not term or not isinstance(term, str):
            return ""
        return _CONTROL_CHARS.sub("", term).strip()[:self.MAX_SEARCH_LENGTH]

    def is_valid_cache_pattern(self, pattern: str) -> bool:
        if not pattern or not isinstance(pattern, str):
            return False
        return bool(_CACHE_PATTERN.match(pattern))
