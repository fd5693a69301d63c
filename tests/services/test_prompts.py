"""Tests for prompt builders."""

import json

from kinetic_lyrics.services.prompts import (
    build_lyrics_prompt,
    build_style_prompt,
    has_reference_lyrics,
    simplify_lyrics,
)


class TestLyricsPrompt:
    """Tests for alignment vs transcription prompt selection."""

    def test_alignment_with_reference(self):
        prompt = build_lyrics_prompt("Line one\nLine two")
        assert "REFERENCE_TEXT" in prompt
        assert "Line one\nLine two" in prompt
        assert "Do not skip lines" in prompt

    def test_transcription_without_reference(self):
        prompt = build_lyrics_prompt(None)
        assert "Transcribe the lyrics" in prompt
        assert "REFERENCE_TEXT" not in prompt

    def test_blank_reference_means_transcription(self):
        assert not has_reference_lyrics("   \n ")
        assert "Transcribe the lyrics" in build_lyrics_prompt("  \n")

    def test_prompts_describe_schema(self):
        for prompt in (build_lyrics_prompt("x"), build_lyrics_prompt()):
            assert '"lyrics"' in prompt
            assert "startTime" in prompt
            assert "slide-up" in prompt


class TestStylePrompt:
    """Tests for the style prompt."""

    def test_simplify(self, make_segment):
        simplified = simplify_lyrics([make_segment("a", text="hi", start=1.0, end=3.5)])
        assert simplified == [{"id": "a", "text": "hi", "duration": 2.5}]

    def test_prompt_contains_lyrics_and_fonts(self, make_segment):
        prompt = build_style_prompt([make_segment("seg-9", text="歌詞")])
        assert "seg-9" in prompt
        assert "歌詞" in prompt
        assert "'hachi-maru'" in prompt
        assert '"styles"' in prompt

    def test_prompt_embeds_valid_json(self, make_segment):
        prompt = build_style_prompt([make_segment("a"), make_segment("b", start=1, end=2)])
        block = prompt.split("```json\n", 1)[1].split("\n```", 1)[0]
        assert [item["id"] for item in json.loads(block)] == ["a", "b"]
