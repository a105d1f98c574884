"""
Jinja2 loader for the migration prompts.

User SQL is passed in as a variable and never parsed as template source,
so `{{ ... }}` inside pasted code reaches the model untouched.
"""

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .templates import PromptTemplate

TEMPLATES_DIR = Path(__file__).parent / "templates"


def _check_templates_exist():
    # Fails at import rather than on the first translation request
    missing = [
        str(TEMPLATES_DIR / template.filename)
        for template in PromptTemplate
        if not (TEMPLATES_DIR / template.filename).exists()
    ]
    if missing:
        raise FileNotFoundError(f"Prompt templates missing: {', '.join(missing)}")


_check_templates_exist()


@lru_cache(maxsize=1)
def _get_environment() -> Environment:
    # Prompts are plain text: no HTML escaping, and a missing variable is an error.
    return Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=False,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render(template: PromptTemplate, **context) -> str:
    """Render one prompt template with the given variables."""
    return _get_environment().get_template(template.filename).render(**context)
