"""Tests for document type detection predicates."""

from __future__ import annotations

import pytest

from axaml_outline.detection import any_of, by_content, by_extension, by_language, is_axaml_document
from axaml_outline.schemas import TextDocument


@pytest.mark.parametrize(
    ("uri", "language_id", "text", "expected"),
    [
        ("Views/MainWindow.axaml", None, "", True),
        ("Views/MAINWINDOW.AXAML", None, "", True),
        ("untitled", "axaml", "", True),
        ("App.xml", "xml", '<Application xmlns="https://github.com/avaloniaui">', True),
        ("App.xaml", "xml", '<Application xmlns="http://schemas.microsoft.com/winfx/2006/xaml/presentation">', False),
        ("notes.txt", None, "<Grid/>", False),
    ],
)
def test_is_axaml_document(uri: str, language_id: str | None, text: str, expected: bool) -> None:
    document = TextDocument(uri=uri, language_id=language_id, text=text)
    assert is_axaml_document(document) is expected


def test_custom_predicates_combine() -> None:
    check = any_of(by_extension(".xaml", ".paml"), by_language("xaml"), by_content("x:Class"))

    assert check(TextDocument(uri="a.paml", text=""))
    assert check(TextDocument(uri="a", language_id="xaml", text=""))
    assert check(TextDocument(uri="a", text='<Window x:Class="A"/>'))
    assert not check(TextDocument(uri="a.html", text="<Grid/>"))
