"""Tests for utterance classification and transcript parsing."""

import pytest

from nocap_verifier.statements import (
    StatementClassifier,
    StatementType,
    classify_statement_type,
    parse_utterances,
)


class TestClassifyStatementType:

    @pytest.mark.parametrize("text", [
        "Is the Earth flat?",
        "How tall is Mount Everest",
        "what year did the war end",
        "Could you repeat that",
        "The moon is made of cheese?",
    ])
    def test_questions(self, text):
        assert classify_statement_type(text) == StatementType.QUESTION

    @pytest.mark.parametrize("text", [
        "I think the Earth is flat",
        "In my opinion pizza is the best food",
        "I like long walks",
        "Taxes ought to be lower",
        "The speed limit should be higher",
    ])
    def test_opinions(self, text):
        assert classify_statement_type(text) == StatementType.OPINION

    @pytest.mark.parametrize("text", [
        "The Earth is flat",
        "Water boils at 100 degrees",
        "Bats are blind",
        "Napoleon was short",
        "It is raining in London",
        "  Humans have 206 bones  ",
    ])
    def test_declaratives(self, text):
        assert classify_statement_type(text) == StatementType.DECLARATIVE

    @pytest.mark.parametrize("text", ["Hello everyone", "Thanks so much", ""])
    def test_other(self, text):
        assert classify_statement_type(text) == StatementType.OTHER

    def test_question_wins_over_declarative(self):
        # Contains " is " but starts like a question
        assert classify_statement_type("Why is the sky blue") == StatementType.QUESTION


class TestStatementClassifier:

    def test_transcribe_builds_record(self):
        classifier = StatementClassifier()

        result = classifier.transcribe("The Earth is flat", "speaker_1")

        assert result.text == "The Earth is flat"
        assert result.speaker_id == "speaker_1"
        assert result.statement_type == StatementType.DECLARATIVE
        assert result.confidence == 0.9
        assert result.timestamp

    def test_explicit_timestamp(self):
        result = StatementClassifier().transcribe("Hi", "s", timestamp="2024-01-01T00:00:00+00:00")
        assert result.timestamp == "2024-01-01T00:00:00+00:00"
        assert result.statement_type == StatementType.OTHER


class TestParseUtterances:

    def test_labelled_lines(self):
        transcript = "ALICE: The Earth is flat.\nBOB: Is it really?\n\nThat is not true [laughs]"

        utterances = parse_utterances(transcript)

        assert [(u.speaker, u.text) for u in utterances] == [
            ("ALICE", "The Earth is flat."),
            ("BOB", "Is it really?"),
            ("BOB", "That is not true"),
        ]
        assert utterances[2].line_number == 4

    def test_unlabelled_transcript(self):
        utterances = parse_utterances("The sun is a star\nWater is wet")
        assert [u.speaker for u in utterances] == ["UNKNOWN", "UNKNOWN"]
        assert [u.text for u in utterances] == ["The sun is a star", "Water is wet"]
