"""Search request model built from the command line."""

from pydantic import BaseModel, ConfigDict, Field

from .post import PopularityMode


class SearchRequest(BaseModel):
    """One search term plus the display preferences for its results."""

    model_config = ConfigDict(frozen=True)

    term: str = Field(..., min_length=1, description="The term to search for")
    show_recent: bool = False
    show_permanent: bool = False
    simple: bool = False

    def selected_modes(self) -> list[PopularityMode]:
        """Lists to display, in display order.

        Asking for both lists is the same as asking for neither: permanent
        posts are shown first, then recent ones.
        """
        if self.show_permanent and not self.show_recent:
            return [PopularityMode.PERMANENT]
        if self.show_recent and not self.show_permanent:
            return [PopularityMode.RECENT]
        return [PopularityMode.PERMANENT, PopularityMode.RECENT]
