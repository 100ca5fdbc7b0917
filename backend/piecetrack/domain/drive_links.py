"""Google Drive share-link normalizer.

Share links (``/file/d/<id>/view``, ``open?id=<id>``) open the Drive viewer
page instead of the image itself; this maps them to the direct-view form that
an ``<img>`` tag can render.
"""

import re

DRIVE_VIEW_TEMPLATE = "https://drive.google.com/uc?export=view&id={file_id}"

_ID_PATTERNS = (
    re.compile(r"/file/d/([A-Za-z0-9_-]+)"),
    re.compile(r"id=([A-Za-z0-9_-]+)"),
)


def extract_drive_file_id(url: str) -> str | None:
    """Return the Drive file id embedded in *url*, trying each pattern in order."""
    for pattern in _ID_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None


def normalize_drive_url(url: str | None) -> str | None:
    """Map a Drive share link to a directly renderable image URL.

    Empty input gives ``None``. A URL with no recognisable Drive id is
    returned unchanged, on the assumption it already points at an image.
    """
    if not url:
        return None
    file_id = extract_drive_file_id(url)
    if file_id is None:
        return url
    return DRIVE_VIEW_TEMPLATE.format(file_id=file_id)
