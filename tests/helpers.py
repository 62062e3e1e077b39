"""Test doubles for document sources and PDF extractors."""

from page_extract.document import DocumentSnapshot, DocumentSource
from page_extract.pdf import PdfTextExtractor, PdfTextResult

ARTICLE_TEXT = (
    "The city council approved the new transit plan on Tuesday evening after "
    "a long debate about bus routes, bicycle lanes and the cost of extending "
    "the tram line to the northern districts."
)


class SequenceSource(DocumentSource):
    """Returns a fixed sequence of snapshots, repeating the last one."""

    def __init__(self, *html_pages: str, url: str = "https://example.com/news/1"):
        self.snapshots = [DocumentSnapshot.from_html(h, url) for h in html_pages]
        self.captures = 0

    async def capture(self) -> DocumentSnapshot:
        index = min(self.captures, len(self.snapshots) - 1)
        self.captures += 1
        return self.snapshots[index]


class FailingSource(DocumentSource):
    """Raises on every capture."""

    async def capture(self) -> DocumentSnapshot:
        raise RuntimeError("page crashed")


class FakePdfExtractor(PdfTextExtractor):
    def __init__(self, result: PdfTextResult, is_pdf: bool = True):
        self.result = result
        self.is_pdf = is_pdf
        self.calls = 0

    def is_pdf_page(self) -> bool:
        return self.is_pdf

    async def extract_text(self) -> PdfTextResult:
        self.calls += 1
        return self.result


def build_pdf(*pages: str) -> bytes:
    """Build a minimal PDF with one line of Helvetica text per page."""
    font_id = 3 + 2 * len(pages)
    kids = " ".join(f"{3 + 2 * i} 0 R" for i in range(len(pages)))
    objects = [
        "<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>",
    ]
    for i, text in enumerate(pages):
        stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET"
        objects.append(
            "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
            f"/Resources << /Font << /F1 {font_id} 0 R >> >> /Contents {4 + 2 * i} 0 R >>"
        )
        objects.append(f"<< /Length {len(stream)} >>\nstream\n{stream}\nendstream")
    objects.append("<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>")

    out = b"%PDF-1.4\n"
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n{body}\nendobj\n".encode("latin-1")

    xref_at = len(out)
    xref = f"xref\n0 {len(objects) + 1}\n0000000000 65535 f \n"
    xref += "".join(f"{offset:010d} 00000 n \n" for offset in offsets)
    xref += f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\nstartxref\n{xref_at}\n%%EOF\n"
    return out + xref.encode("latin-1")
