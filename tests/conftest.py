"""Pytest configuration and shared fixtures for the vbcode test suite."""

import os

import pytest

from vbcode.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    Link,
    List,
    ListItem,
    Paragraph,
    Strong,
    Text,
    ThematicBreak,
)

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Verbosity, settings

    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)
    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, property tests will be skipped
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def sample_document() -> Document:
    """Provide a document exercising most supported node kinds.

    Returns
    -------
    Document
        Heading, paragraph with inline formatting, list, quote, rule and code.

    """
    return Document(
        children=[
            Heading(level=1, content=[Text("Sample Document")]),
            Paragraph(
                content=[
                    Text("This is a "),
                    Strong(content=[Text("sample")]),
                    Text(" with "),
                    Emphasis(content=[Text("emphasis")]),
                    Text(", "),
                    Code("inline code"),
                    Text(" and a "),
                    Link(url="https://example.com", content=[Text("link")]),
                    Text("."),
                ]
            ),
            List(
                ordered=False,
                items=[
                    ListItem(children=[Paragraph(content=[Text("Item 1")])]),
                    ListItem(children=[Paragraph(content=[Text("Item 2")])]),
                ],
            ),
            BlockQuote(children=[Paragraph(content=[Text("Quoted")])]),
            ThematicBreak(),
            CodeBlock(content='print("hi")', language="python"),
        ]
    )
