"""
Skill cloud state

The only mutable state of a profile page: whether the skill cloud is
collapsed (first `limit` skills) or expanded (all skills). Each rendered view
owns one instance; it starts collapsed and changes only through `toggle()`.
Nothing is persisted across reloads.
"""

from pydantic import BaseModel, Field

from .constants.page_constants import PageDefaults, PageTexts
from .models.view_model import ProfileViewModel


class SkillCloudState(BaseModel):
    """Two-state machine: collapsed <-> expanded."""

    skills: list[str] = Field(default_factory=list)
    limit: int = Field(default=PageDefaults.SKILL_CLOUD_LIMIT, gt=0)
    expanded: bool = False

    @classmethod
    def for_view_model(cls, view_model: ProfileViewModel) -> "SkillCloudState":
        """Initial (collapsed) state for a page."""
        return cls(skills=list(view_model.skills), limit=view_model.skill_cloud_limit)

    def toggle(self) -> "SkillCloudState":
        """Switches between collapsed and expanded."""
        self.expanded = not self.expanded
        return self

    @property
    def is_empty(self) -> bool:
        """Nothing is rendered for a profile without skills."""
        return not self.skills

    @property
    def is_truncatable(self) -> bool:
        return len(self.skills) > self.limit

    @property
    def visible_skills(self) -> list[str]:
        if self.expanded:
            return list(self.skills)
        return self.skills[: self.limit]

    @property
    def show_ellipsis(self) -> bool:
        """Trailing '...' marker, only while collapsed over the limit."""
        return not self.expanded and self.is_truncatable

    @property
    def show_toggle(self) -> bool:
        return self.is_truncatable

    @property
    def toggle_label(self) -> str:
        return PageTexts.SHOW_FEWER_SKILLS if self.expanded else PageTexts.SHOW_ALL_SKILLS
