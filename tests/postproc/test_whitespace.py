"""Twig whitespace normalisation."""

from __future__ import annotations

from svelte2twig.postproc.whitespace import TwigWhitespaceNormalizer


def test_trailing_spaces_and_blank_runs_are_collapsed() -> None:
    template = "\n\n<div>  \n\n\n\n  <p>x</p>\t\n</div>\n\n"
    assert TwigWhitespaceNormalizer().normalize(template) == "<div>\n\n  <p>x</p>\n</div>\n"


def test_crlf_is_normalised() -> None:
    assert TwigWhitespaceNormalizer().normalize("a\r\nb\r\n") == "a\nb\n"


def test_pre_blocks_are_left_untouched() -> None:
    template = "<pre>\n  keep   \n\n\n</pre>\n\n\nafter"
    assert TwigWhitespaceNormalizer().normalize(template) == (
        "<pre>\n  keep   \n\n\n</pre>\n\nafter\n"
    )


def test_output_always_ends_with_one_newline() -> None:
    assert TwigWhitespaceNormalizer().normalize("<hr />") == "<hr />\n"
