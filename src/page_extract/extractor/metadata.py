"""Document-level metadata."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from page_extract.document import DocumentSnapshot
from page_extract.utils.url_utils import get_hostname


class Metadata(BaseModel):
    """Descriptive metadata of an extracted page."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    title: str = ""
    url: str = ""
    domain: str = ""
    language: str = "unknown"
    description: str = ""
    author: str = ""
    keywords: list[str] = Field(default_factory=list)
    is_pdf: bool | None = Field(default=None, alias="isPDF")
    pdf_pages: int | None = None
    pdf_total_pages: int | None = None


class MetadataExtractor:
    """Read title, language and meta tags from a document.

    When several meta tags map to the same field, the last one in document
    order wins.
    """

    def extract(self, snapshot: DocumentSnapshot) -> Metadata:
        soup = snapshot.soup

        title = ""
        title_tag = soup.find("title")
        if title_tag:
            title = " ".join(title_tag.get_text().split())

        language = ""
        if soup.html is not None:
            language = soup.html.get("lang") or ""

        fields: dict = {
            "title": title,
            "url": snapshot.url,
            "domain": get_hostname(snapshot.url),
            "language": language or "unknown",
        }

        for meta in soup.find_all("meta"):
            name = meta.get("name") or meta.get("property")
            content = meta.get("content")
            if not name or not content:
                continue

            if name in ("description", "og:description"):
                fields["description"] = content
            if name == "author":
                fields["author"] = content
            if name == "keywords":
                fields["keywords"] = [k.strip() for k in content.split(",")]

        return Metadata(**fields)
