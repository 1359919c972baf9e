"""
Prompt template handling for the health assistant.
The template lives in prompts/health_assistant.txt; the user's message is appended verbatim.
"""
from functools import lru_cache
from pathlib import Path

@lru_cache(maxsize=1)
def load_prompt_template() -> str:
    p = Path(__file__).resolve().parents[1] / "prompts" / "health_assistant.txt"
    return p.read_text(encoding="utf-8").strip()

def build_prompt(message: str, template: str | None = None) -> str:
    system = template if template is not None else load_prompt_template()
    return f"{system}\n\nUser's concern: {message}"

def format_reply(text: str) -> str:
    # collapse blank lines the model puts between paragraphs
    return text.replace("\n\n", "\n").strip()
