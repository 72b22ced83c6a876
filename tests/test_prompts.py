import pytest

from studybot.modules.prompts import (
    DEFAULT_QUESTION_INSTRUCTION,
    PromptKind,
    build_prompt,
    flashcard_prompt,
    question_prompt,
    simplify_instruction,
    validation_prompt,
)

EXCERPT = "Water boils at 100 degrees Celsius at sea level."


@pytest.mark.unit
def test_flashcard_prompt_embeds_excerpt_and_topic():
    prompt = flashcard_prompt(EXCERPT, "boiling point")
    assert prompt.startswith("You are a chatbot that helps users learn topics")
    assert f"'{EXCERPT}'" in prompt
    assert "User's question or topic: 'boiling point'" in prompt
    assert "Create a flashcard with a question and answer" in prompt
    assert "JSON" not in prompt


@pytest.mark.unit
def test_question_prompt_demands_only_json():
    prompt = question_prompt(EXCERPT, "focus on units")
    assert f'"{EXCERPT}"' in prompt
    assert "four options labeled A, B, C, and D" in prompt
    assert "Return only the JSON object (no additional text)" in prompt
    assert '"options": ["A. Option text", "B. Option text", "C. Option text", "D. Option text"]' in prompt
    assert prompt.rstrip().endswith('User\'s instruction: "focus on units"')


@pytest.mark.unit
def test_question_prompt_uses_default_instruction_when_blank():
    assert DEFAULT_QUESTION_INSTRUCTION in question_prompt(EXCERPT, "   ")
    assert DEFAULT_QUESTION_INSTRUCTION in question_prompt(EXCERPT)


@pytest.mark.unit
def test_question_prompt_excludes_previous_question():
    prompt = question_prompt(EXCERPT, "", exclude="What is the boiling point of water?")
    assert (
        'completely different from the previous question: '
        '"What is the boiling point of water?"'
    ) in prompt
    assert "previous question" not in question_prompt(EXCERPT, "", exclude="  ")


@pytest.mark.unit
def test_validation_prompt():
    prompt = validation_prompt("Capital of France?", "B. Paris")
    assert '"Capital of France?"' in prompt
    assert '"B. Paris"' in prompt
    assert '{"correct": true}' in prompt
    assert '{"correct": false}' in prompt


@pytest.mark.unit
def test_embedded_content_is_not_escaped():
    tricky = "He said \"stop\" and {braces} and 'quotes'"
    assert tricky in flashcard_prompt(tricky, tricky)
    assert tricky in question_prompt(tricky, tricky)


@pytest.mark.unit
def test_simplify_instruction_wraps_existing_card():
    text = simplify_instruction("What is X?", "X is a long winded thing.")
    assert "**Front:** What is X?" in text
    assert "**Back:** X is a long winded thing." in text
    assert "Keep the question exactly as it is" in text


@pytest.mark.unit
def test_build_prompt_dispatches_on_kind():
    assert build_prompt("flashcard", EXCERPT, "topic") == flashcard_prompt(EXCERPT, "topic")
    assert build_prompt(PromptKind.QUESTION, EXCERPT, "i", extra="old") == question_prompt(
        EXCERPT, "i", exclude="old"
    )
    assert build_prompt("validation", "", "Q?", extra="A. yes") == validation_prompt("Q?", "A. yes")


@pytest.mark.unit
def test_build_prompt_rejects_unknown_kind():
    with pytest.raises(ValueError):
        build_prompt("essay", EXCERPT, "topic")
