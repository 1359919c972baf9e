# tests/test_prompt.py
from healthchat.services.prompt import build_prompt, format_reply, load_prompt_template

def test_template_loaded():
    t = load_prompt_template()
    assert t.startswith("You are a friendly and empathetic healthcare assistant.")
    assert "When to seek professional help" in t
    assert t == t.strip()

def test_build_prompt_embeds_message_verbatim():
    msg = "  my knee hurts\n\nwhen I run  "
    text = build_prompt(msg)
    assert text.startswith(load_prompt_template())
    assert text.endswith(f"\n\nUser's concern: {msg}")

def test_build_prompt_custom_template():
    assert build_prompt("hi", template="T") == "T\n\nUser's concern: hi"

def test_format_reply_collapses_and_trims():
    assert format_reply("Hello\n\nWorld") == "Hello\nWorld"
    assert format_reply("  a\n\nb\n\nc \n") == "a\nb\nc"
    # non-overlapping, left to right
    assert format_reply("a\n\n\n\nb") == "a\n\nb"
    assert format_reply("a\n\n\nb") == "a\n\nb"
