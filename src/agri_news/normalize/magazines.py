# ABOUTME: Picks magazine-issue PDFs out of the WordPress media library.
# ABOUTME: Derives "Issue N" and "Month Year" labels from the title and file URL.

import re

import structlog

from agri_news.models import Magazine
from agri_news.normalize.html import clean_html
from agri_news.wordpress.schemas import WPMediaItem

log = structlog.get_logger()

DEFAULT_ISSUE = "Latest Issue"
DEFAULT_MONTH_YEAR = "Recent"

ISSUE_TITLE_RE = re.compile(r"ISSUE\s*-?\s*\d+")
ISSUE_NUMBER_RE = re.compile(r"ISSUE[\s-]*\d+")
DIGITS_RE = re.compile(r"\d+")
# Leftmost match wins; the two-digit fallback can hit an issue number when no 4-digit year exists
YEAR_RE = re.compile(r"20\d{2}|\b\d{2}\b")

SKIP_KEYWORDS = ["FLYER", "BUDGET", "SPEECH", "BANNER", "ADVERT", "AD-"]

# Full names first, then abbreviations; first substring hit wins
MONTH_TOKENS: list[tuple[str, str]] = [
    ("JANUARY", "January"),
    ("FEBRUARY", "February"),
    ("MARCH", "March"),
    ("APRIL", "April"),
    ("MAY", "May"),
    ("JUNE", "June"),
    ("JULY", "July"),
    ("AUGUST", "August"),
    ("SEPTEMBER", "September"),
    ("OCTOBER", "October"),
    ("NOVEMBER", "November"),
    ("DECEMBER", "December"),
    ("JAN", "January"),
    ("FEB", "February"),
    ("MAR", "March"),
    ("APR", "April"),
    ("MAY", "May"),
    ("JUN", "June"),
    ("JUL", "July"),
    ("AUG", "August"),
    ("SEP", "September"),
    ("OCT", "October"),
    ("NOV", "November"),
    ("DEC", "December"),
]


def is_magazine_issue(item: WPMediaItem) -> bool:
    """Whether a media item is a magazine issue PDF rather than a flyer, ad or speech."""
    title = item.title.rendered.upper()
    source_url = item.source_url.upper()

    if ".PDF" not in source_url:
        return False
    if not ISSUE_TITLE_RE.search(title):
        return False
    return not any(keyword in title or keyword in source_url for keyword in SKIP_KEYWORDS)


def extract_issue_info(title: str, url: str) -> tuple[str, str]:
    """Extract issue number and month/year labels.

    Args:
        title: Sanitized media title.
        url: PDF source URL.

    Returns:
        Tuple of ("Issue N" or "Latest Issue", "Month YYYY" or "Recent").
    """
    combined = f"{title} {url}".upper()

    issue_number = DEFAULT_ISSUE
    issue_match = ISSUE_NUMBER_RE.search(combined)
    if issue_match:
        number = DIGITS_RE.search(issue_match.group())
        if number:
            issue_number = f"Issue {number.group()}"

    month_year = DEFAULT_MONTH_YEAR
    for token, full_month in MONTH_TOKENS:
        if token not in combined:
            continue
        year_match = YEAR_RE.search(combined)
        if year_match:
            year = year_match.group()
            if len(year) == 2:
                year = f"20{year}"
            month_year = f"{full_month} {year}"
            break

    return issue_number, month_year


def extract_magazines(items: list[WPMediaItem]) -> list[Magazine]:
    """Filter media items down to magazine issues, newest first.

    Sorting compares the raw ISO-8601 date strings.
    """
    magazines: list[Magazine] = []

    for item in items:
        if not is_magazine_issue(item):
            log.debug("media_item_skipped", id=item.id, url=item.source_url)
            continue

        title = clean_html(item.title.rendered)
        issue_number, month_year = extract_issue_info(title, item.source_url)

        magazines.append(
            Magazine(
                id=item.id,
                title=title,
                issue_number=issue_number,
                month_year=month_year,
                pdf_url=item.source_url,
                published_date=item.date,
            )
        )

    return sorted(magazines, key=lambda magazine: magazine.published_date, reverse=True)
