from typing import Iterable, List, Optional

from recruitme.core.errors import ValidationError

MAX_SKILL_LENGTH = 100


def normalize_skills(skills: Optional[Iterable[str]]) -> List[str]:
    """
    Strip and de-duplicate a skill list, keeping first-seen order.

    Raises:
        ValidationError: on a blank skill or one longer than the column allows
    """
    cleaned = []
    for skill in skills or []:
        skill = skill.strip()
        if not skill:
            raise ValidationError("Skill names must not be empty")
        if len(skill) > MAX_SKILL_LENGTH:
            raise ValidationError(f"Skill names must be {MAX_SKILL_LENGTH} characters or fewer")
        cleaned.append(skill)
    # Duplicates would collide on the (owner, skill) primary key
    return list(dict.fromkeys(cleaned))
