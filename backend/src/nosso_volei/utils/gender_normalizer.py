"""Centralized gender normalization utility.

Stored rosters use the Portuguese labels "Masculino" / "Feminino". Request
bodies and imported files may use shorter or English forms, so all parsing
goes through this module.
"""

from typing import Optional

from nosso_volei.models.player import Gender

# Mapping from any known gender label (lowercase) to the canonical enum
GENDER_ALIASES: dict[str, Gender] = {
    # Male variations
    "masculino": Gender.MALE,
    "m": Gender.MALE,
    "male": Gender.MALE,
    "man": Gender.MALE,
    "homem": Gender.MALE,
    "h": Gender.MALE,

    # Female variations
    "feminino": Gender.FEMALE,
    "f": Gender.FEMALE,
    "female": Gender.FEMALE,
    "woman": Gender.FEMALE,
    "mulher": Gender.FEMALE,
}


def normalize_gender(value: Optional[str]) -> Optional[Gender]:
    """Normalize a gender label to the canonical enum.

    Args:
        value: Gender label in any known format (e.g. "Masculino", "M", "Mulher")

    Returns:
        Gender member, or None if the label is unknown or None

    Examples:
        >>> normalize_gender("Homem")
        <Gender.MALE: 'Masculino'>
        >>> normalize_gender("F")
        <Gender.FEMALE: 'Feminino'>
        >>> normalize_gender("x") is None
        True
    """
    if value is None:
        return None
    if isinstance(value, Gender):
        return value
    return GENDER_ALIASES.get(str(value).strip().lower())


def normalize_gender_strict(value: str) -> Gender:
    """Normalize a gender label, raising ValueError if unknown."""
    normalized = normalize_gender(value)
    if normalized is None:
        raise ValueError(f"Unknown gender: {value}")
    return normalized
