import pytest

from sqlstore.dialects import EngineKind, PostgresDialect


def test_postgres_dialect_quotes_identifiers():
    dialect = PostgresDialect()
    assert dialect.quote_identifier("users") == '"users"'
    assert dialect.quote_identifier('table"name') == '"table""name"'
    assert dialect.format_table("public.users", "fb_") == '"public"."fb_users"'


def test_postgres_dialect_placeholder():
    dialect = PostgresDialect()
    assert dialect.parameter_placeholder(1) == "$1"
    assert dialect.parameter_placeholder(12) == "$12"
    with pytest.raises(ValueError):
        dialect.parameter_placeholder(0)


def test_postgres_concat_and_contains():
    dialect = PostgresDialect()
    assert dialect.concat_aggregate("name", ",") == "string_agg(name, ',')"
    assert dialect.concat_aggregate("name", "'") == "string_agg(name, '''')"
    assert dialect.contains_predicate(3, "b.title") == "position($3 in b.title) > 0"


def test_postgres_rebind_numbers_markers_outside_literals():
    dialect = PostgresDialect()
    sql = "SELECT * FROM blocks WHERE id = ? AND title <> 'why?' AND \"q?\" = ?"
    assert dialect.rebind(sql) == (
        "SELECT * FROM blocks WHERE id = $1 AND title <> 'why?' AND \"q?\" = $2"
    )


def test_postgres_metadata():
    dialect = PostgresDialect()
    assert dialect.engine is EngineKind.POSTGRES
    assert dialect.placeholder_style == "dollar"


def test_postgres_rebind_skips_comments():
    dialect = PostgresDialect()
    assert dialect.rebind("SELECT 1 -- it's ?\nWHERE a = ?") == "SELECT 1 -- it's ?\nWHERE a = $1"
    assert dialect.rebind("SELECT /* don't ? */ a FROM t WHERE b = ? AND c = ?") == (
        "SELECT /* don't ? */ a FROM t WHERE b = $1 AND c = $2"
    )


def test_postgres_rebind_double_question_mark_is_literal():
    dialect = PostgresDialect()
    assert dialect.rebind("SELECT * FROM cards WHERE props ?? 'due' AND id = ?") == (
        "SELECT * FROM cards WHERE props ? 'due' AND id = $1"
    )
