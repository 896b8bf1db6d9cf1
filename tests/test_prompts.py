from morning.core.prompts import GREETING_PROMPT, build_prompt


def test_default_prompt_embeds_names_and_weather():
    prompt = build_prompt(["Alice", "Bob"], "12°C, clear sky")
    assert "for: Alice, Bob." in prompt
    assert "Weather: 12°C, clear sky." in prompt
    assert "Russian" in prompt
    assert "without any explanations" in prompt


def test_custom_template_with_literal_braces():
    prompt = build_prompt(["Alice"], "rain", template="{names} / {weather} / {other}")
    assert prompt == "Alice / rain / {other}"


def test_default_template_is_used():
    assert build_prompt([], "x") == GREETING_PROMPT.replace("{names}", "").replace("{weather}", "x")
