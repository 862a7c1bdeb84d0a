"""Pixiv post models matching the popular section of the search API."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictStr

from ..config import DEFAULT_LANGUAGE, DEFAULT_SITE_URL

# Internal field name -> name used by the pixiv API
POST_FIELD_ALIASES = {
    "id": "id",
    "title": "title",
    "author_name": "userName",
    "author_id": "userId",
}


class PopularityMode(str, Enum):
    """The two popularity rankings pixiv returns."""

    RECENT = "recent"
    PERMANENT = "permanent"

    @property
    def adverb(self) -> str:
        return f"{self.value}ly"


class Post(BaseModel):
    """A single artwork from a popular list."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=lambda name: POST_FIELD_ALIASES.get(name, name),
    )

    id: StrictStr
    title: StrictStr
    author_name: StrictStr
    author_id: StrictStr

    def artwork_url(
        self, site_url: str = DEFAULT_SITE_URL, language: str = DEFAULT_LANGUAGE
    ) -> str:
        """Canonical artwork page for this post."""
        return f"{site_url}/{language}/artworks/{self.id}"

    def user_url(
        self, site_url: str = DEFAULT_SITE_URL, language: str = DEFAULT_LANGUAGE
    ) -> str:
        """Canonical profile page of the post's author."""
        return f"{site_url}/{language}/users/{self.author_id}"


class PopularPosts(BaseModel):
    """Recently and permanently popular posts, in pixiv's ranking order."""

    model_config = ConfigDict(frozen=True)

    recent: list[Post] = Field(..., description="Recently popular posts")
    permanent: list[Post] = Field(..., description="Permanently popular posts")

    @property
    def is_empty(self) -> bool:
        return not self.recent and not self.permanent

    @property
    def total(self) -> int:
        return len(self.recent) + len(self.permanent)

    def posts_for(self, mode: PopularityMode) -> list[Post]:
        """Return the list for ``mode`` without reordering it."""
        if mode is PopularityMode.RECENT:
            return self.recent
        return self.permanent
