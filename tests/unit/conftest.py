"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

import pytest
import respx

# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


# ============================================================================
# Webstore Page Fixtures
# ============================================================================


def results_page(*entries: tuple[str, str, str]) -> str:
    """Render a results page from ``(code, title, href)`` entries."""
    items = "\n".join(
        f"""
        <li>
          <a href="#" class="toggle">+</a>
          <a href="{href}"> {code} </a>
          {title}
        </li>"""
        for code, title, href in entries
    )
    return f"""
    <html><body>
      <div class="summary">{len(entries)} results</div>
      <ul class="search-results">{items}
      </ul>
    </body></html>"""


def detail_page(
    title: str,
    *,
    published: str | None = None,
    edition: str | None = None,
    stage: str | None = None,
    language: str | None = None,
    committee: str | None = None,
    abstract: str | None = None,
) -> str:
    """Render a document page with a properties table."""
    rows = {
        "Publication date": published,
        "Edition": edition,
        "Stage": stage,
        "Language": language,
        "TC/SC": committee,
    }
    table = "\n".join(
        f"<tr><th>{label}:</th><td>{value}</td></tr>"
        for label, value in rows.items()
        if value is not None
    )
    abstract_html = f'<div class="abstract"><p>{abstract}</p></div>' if abstract else ""
    return f"""
    <html><body>
      <h2 class="product-title">{title}</h2>
      <table class="properties">{table}</table>
      {abstract_html}
    </body></html>"""


@pytest.fixture
def results_html():
    """Factory for search results page markup."""
    return results_page


@pytest.fixture
def detail_html():
    """Factory for document page markup."""
    return detail_page
