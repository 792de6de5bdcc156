"""Category and advanced filtering for the talent directory."""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from src.models.talent import Talent, TalentCategory, AdvancedFilters, KIDS_AGE_LIMIT


def matches_category(talent: Talent, category: Union[TalentCategory, str]) -> bool:
    """Category pill rule; All places no constraint."""
    category = TalentCategory(category)
    if category == TalentCategory.MALE:
        return talent.gender == "Male" and talent.age >= KIDS_AGE_LIMIT
    if category == TalentCategory.FEMALE:
        return talent.gender == "Female" and talent.age >= KIDS_AGE_LIMIT
    if category == TalentCategory.KIDS:
        return talent.age < KIDS_AGE_LIMIT
    return True


def matches_advanced(talent: Talent, filters: AdvancedFilters) -> bool:
    """All advanced-panel constraints at once."""
    if filters.location and filters.location.lower() not in talent.location.lower():
        return False
    if talent.age < filters.min_age or talent.age > filters.max_age:
        return False
    if filters.gender != "All" and talent.gender != filters.gender:
        return False
    if filters.min_height > 0 and talent.height_cm < filters.min_height:
        return False
    return True


def filter_talents(
    talents: Iterable[Talent],
    category: Union[TalentCategory, str] = TalentCategory.ALL,
    advanced_active: bool = False,
    filters: Optional[AdvancedFilters] = None,
) -> list[Talent]:
    """Talents passing the category rule AND, when active, the advanced rules.

    Input order is preserved.
    """
    filters = filters or AdvancedFilters()
    return [
        talent for talent in talents
        if matches_category(talent, category)
        and (not advanced_active or matches_advanced(talent, filters))
    ]


@dataclass
class DirectoryView:
    """Filter state behind the directory page."""
    category: TalentCategory = TalentCategory.ALL
    advanced_active: bool = False
    filters: AdvancedFilters = field(default_factory=AdvancedFilters)

    def select_category(self, category: Union[TalentCategory, str]) -> None:
        self.category = TalentCategory(category)

    def toggle_advanced(self) -> bool:
        """Open or close the advanced panel; opening resets the category to All."""
        self.advanced_active = not self.advanced_active
        if self.advanced_active:
            self.category = TalentCategory.ALL
        return self.advanced_active

    def apply(self, talents: Iterable[Talent]) -> list[Talent]:
        return filter_talents(talents, self.category, self.advanced_active, self.filters)
