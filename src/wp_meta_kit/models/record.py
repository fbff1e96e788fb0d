"""Content record model and host constants."""

from pydantic import BaseModel, ConfigDict

# Post meta key under which Yoast SEO stores the meta description
META_DESCRIPTION_KEY = "_yoast_wpseo_metadesc"

# Status filter that matches records in every state (published, draft, ...)
STATUS_ANY = "any"


class Record(BaseModel):
    """A content item in the host store.

    Attributes:
        id: Numeric record identifier
        type: Content type name (e.g., "post", "page")
        title: Record title
        slug: Identifier unique within the record's type
    """

    model_config = ConfigDict(frozen=True)

    id: int
    type: str
    title: str = ""
    slug: str
