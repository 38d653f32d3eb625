"""
Tests for text translation: tokenization, reassembly and detailed results.
"""

import pytest

from pig_latin import (
    PigLatinTranslator,
    Span,
    TranslationResult,
    is_delimiter,
    split_spans,
    translate,
    translate_detailed,
)


# =============================================================================
# Delimiter Classification
# =============================================================================


class TestIsDelimiter:
    @pytest.mark.parametrize("char", [".", ",", "!", "?", "-", "(", ")", "'", '"', "_", "~"])
    def test_ascii_punctuation(self, char):
        assert is_delimiter(char)

    @pytest.mark.parametrize("char", [" ", "\t", "\n", "\r", "\u00a0", "\u2003", "\u3000"])
    def test_unicode_whitespace(self, char):
        assert is_delimiter(char)

    @pytest.mark.parametrize("char", ["a", "Z", "7", "é", "¿", "«"])
    def test_word_characters(self, char):
        assert not is_delimiter(char)

    @pytest.mark.parametrize("char", ["\x1c", "\x1d", "\x1e", "\x1f"])
    def test_information_separators_are_word_characters(self, char):
        assert not is_delimiter(char)


# =============================================================================
# split_spans
# =============================================================================


class TestSplitSpans:
    def test_empty(self):
        assert list(split_spans("")) == []

    def test_alternates(self):
        spans = list(split_spans("Hi, you!"))
        assert [s.original for s in spans] == ["Hi", ", ", "you", "!"]
        assert [s.is_word for s in spans] == [True, False, True, False]

    def test_offsets(self):
        text = "  pigs latin."
        for span in split_spans(text):
            assert text[span.start : span.end] == span.original

    def test_leading_and_trailing_separators(self):
        spans = list(split_spans("...word..."))
        assert [s.original for s in spans] == ["...", "word", "..."]

    def test_never_empty(self):
        for text in ["a", "!", "a!", "!a", "a  b", "--a--b--"]:
            assert all(span.original for span in split_spans(text))

    def test_reconstructs_input(self):
        text = "Hello,\tworld!\n\n(Pig-Latin)  is fun..."
        assert "".join(s.original for s in split_spans(text)) == text


# =============================================================================
# translate
# =============================================================================


class TestTranslate:
    def test_empty(self):
        assert translate("") == ""

    def test_word(self):
        assert translate("Hello") == "Ellohay"

    def test_sentence(self):
        assert translate("Hello world!") == "Ellohay orldway!"

    def test_this_is_pigs_latin(self):
        assert translate("This is pigs latin.") == "Isthay ishay igspay atinlay."

    def test_easy_innit(self):
        assert (
            translate("This is all quite easy, is it not?")
            == "Isthay ishay allhay itequay easyhay, ishay ithay otnay?"
        )

    def test_question(self):
        assert translate("Question:") == "Estionquay:"

    def test_vowel_words_with_hyphen(self):
        assert (
            translate("Early-Adopters are ecstatic?")
            == "Earlyhay-Adoptershay arehay ecstatichay?"
        )

    def test_only_separators(self):
        assert translate(" \t...\n") == " \t...\n"

    def test_preserves_layout(self, readme_english, readme_pig_latin):
        assert translate(readme_english) == readme_pig_latin

    def test_multiline(self):
        text = "Hello World!\nThis is a second line.\n"
        assert translate(text) == "Ellohay Orldway!\nIsthay ishay ahay econdsay inelay.\n"

    def test_unicode_whitespace_separates(self):
        assert translate("pigs\u00a0latin") == "igspay\u00a0atinlay"

    def test_information_separator_stays_in_word(self):
        assert translate("a\x1cb") == "a\x1cbhay"
        assert translate("pig\x1fs latin") == "ig\x1fspay atinlay"

    def test_non_ascii_punctuation_stays_in_word(self):
        assert translate("¿que?") == "e¿quay?"

    @pytest.mark.parametrize(
        "text",
        [
            "This is pigs latin.",
            "  (Pig-Latin)\tis, QUITE; fun!  ",
            "ﬁre and Straße",
            "R2-D2 & C-3PO",
        ],
    )
    def test_span_structure_is_preserved(self, text):
        before = list(split_spans(text))
        after = list(split_spans(translate(text)))
        assert [s.is_word for s in after] == [s.is_word for s in before]
        assert [s.original for s in after if not s.is_word] == [
            s.original for s in before if not s.is_word
        ]


# =============================================================================
# PigLatinTranslator
# =============================================================================


class TestPigLatinTranslator:
    def test_translate(self, translator: PigLatinTranslator):
        assert translator.translate("This is pigs latin.") == "Isthay ishay igspay atinlay."

    def test_translate_word(self, translator: PigLatinTranslator):
        assert translator.translate_word("quaint") == "aintquay"

    def test_matches_module_function(self, translator: PigLatinTranslator, readme_english):
        assert translator.translate(readme_english) == translate(readme_english)

    def test_detailed_result(self, translator: PigLatinTranslator):
        result = translator.translate_detailed("Hello world!")
        assert isinstance(result, TranslationResult)
        assert result.original == "Hello world!"
        assert result.translated == "Ellohay orldway!"
        assert result.spans == [
            Span(start=0, end=5, original="Hello", translated="Ellohay", is_word=True),
            Span(start=5, end=6, original=" ", translated=" ", is_word=False),
            Span(start=6, end=11, original="world", translated="orldway", is_word=True),
            Span(start=11, end=12, original="!", translated="!", is_word=False),
        ]

    def test_detailed_words(self, translator: PigLatinTranslator):
        result = translator.translate_detailed("pigs, latin.")
        assert [w.translated for w in result.words] == ["igspay", "atinlay"]

    def test_detailed_empty(self, translator: PigLatinTranslator):
        result = translator.translate_detailed("")
        assert result.translated == ""
        assert result.spans == []

    def test_detailed_matches_translate(self, readme_english):
        assert translate_detailed(readme_english).translated == translate(readme_english)

    def test_detailed_reconstructs_original(self, readme_english):
        result = translate_detailed(readme_english)
        assert "".join(s.original for s in result.spans) == readme_english
