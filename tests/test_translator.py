import asyncio

import pytest

from ora2pg_web.data.samples import DEFAULT_ORACLE_CODE
from ora2pg_web.domain.models import MigrationType
from ora2pg_web.migration.translator import EXPLANATION_EMPTY, EXPLANATION_FALLBACK
from ora2pg_web.services.exceptions import TRANSLATION_FAILED_MESSAGE, TranslationError


def test_translate_sends_system_instruction_and_source(translator, llm):
    result = asyncio.run(translator.translate(DEFAULT_ORACLE_CODE, MigrationType.SCHEMA))

    assert result == "SELECT 1;"
    assert len(llm.calls) == 1
    call = llm.calls[0]
    assert call["model_name"] == "translate-model"
    assert call["reasoning_effort"] == "medium"
    assert call["plain_text"] is True

    system, user = call["messages"]
    assert system["role"] == "system"
    assert "NVL -> COALESCE" in system["content"]
    assert "Return ONLY the SQL code" in system["content"]
    assert user["role"] == "user"
    assert "MIGRATION TYPE: SCHEMA (Table/Schema DDL)" in user["content"]
    assert DEFAULT_ORACLE_CODE in user["content"]
    assert "Postgres 15+" in user["content"]


@pytest.mark.parametrize("kind", list(MigrationType))
def test_translate_embeds_each_migration_label(translator, llm, kind):
    asyncio.run(translator.translate("SELECT 1 FROM dual", kind))

    prompt = llm.calls[0]["messages"][1]["content"]
    assert f"MIGRATION TYPE: {kind.value} ({kind.label})" in prompt


def test_translate_strips_markdown_fences(translator, llm):
    llm.reply = "```postgresql\nSELECT CURRENT_TIMESTAMP;\n```"

    result = asyncio.run(translator.translate("SELECT SYSDATE FROM dual", MigrationType.QUERY))

    assert result == "SELECT CURRENT_TIMESTAMP;"


def test_source_with_template_syntax_is_sent_verbatim(translator, llm):
    source = "SELECT '{{ not_a_variable }}' FROM dual"

    asyncio.run(translator.translate(source, MigrationType.QUERY))

    assert source in llm.calls[0]["messages"][1]["content"]


def test_translate_failure_raises_generic_error(translator, llm):
    llm.error = ConnectionError("network down")

    with pytest.raises(TranslationError) as excinfo:
        asyncio.run(translator.translate(DEFAULT_ORACLE_CODE, MigrationType.SCHEMA))

    assert excinfo.value.message == TRANSLATION_FAILED_MESSAGE
    assert str(excinfo.value) == "Failed to translate code. Please check the input and try again."
    # No automatic retry
    assert len(llm.calls) == 1


def test_explain_uses_lighter_model_without_configuration(translator, llm):
    llm.reply = "- VARCHAR2 became VARCHAR"

    result = asyncio.run(translator.explain("SELECT SYSDATE FROM dual", "SELECT now();"))

    assert result == "- VARCHAR2 became VARCHAR"
    call = llm.calls[0]
    assert call["model_name"] == "explain-model"
    assert call["reasoning_effort"] is None
    assert call["plain_text"] is False
    assert [m["role"] for m in call["messages"]] == ["user"]


def test_explain_truncates_both_snippets(translator, llm):
    source = "A" * 1000 + "B" * 50
    target = "C" * 1000 + "D" * 50

    asyncio.run(translator.explain(source, target))

    prompt = llm.calls[0]["messages"][0]["content"]
    assert "A" * 1000 + "..." in prompt
    assert "C" * 1000 + "..." in prompt
    assert "B" not in prompt.split("ORACLE:")[1].split("POSTGRES:")[0]
    assert "D" not in prompt.split("POSTGRES:")[1]


def test_explain_failure_returns_fallback(translator, llm):
    llm.error = RuntimeError("quota exceeded")

    result = asyncio.run(translator.explain("SELECT 1 FROM dual", "SELECT 1;"))

    assert result == EXPLANATION_FALLBACK == "Could not generate explanation."


def test_explain_empty_reply(translator, llm):
    llm.reply = ""

    result = asyncio.run(translator.explain("SELECT 1 FROM dual", "SELECT 1;"))

    assert result == EXPLANATION_EMPTY
