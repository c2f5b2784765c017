from typing import NamedTuple, Optional

HTML_MEDIA_TYPES = ("text/html", "application/xhtml+xml")


class HttpResponse(NamedTuple):
    """Response from HTTP fetch operation.

    `url` is the final location after redirects, which can differ from the
    URL that was requested.
    """
    status_code: int
    text: str
    content_type: Optional[str] = None
    url: Optional[str] = None

    def is_html(self) -> bool:
        # A server that sends no Content-Type is given the benefit of the doubt
        if not self.content_type:
            return True
        media_type = self.content_type.split(";", 1)[0].strip().lower()
        return media_type in HTML_MEDIA_TYPES
