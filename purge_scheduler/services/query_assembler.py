"""
Query Assembler - builds the pg_cron registration statement.

The purge runs as a CTE that selects at most ``limit`` ids matching the
retention predicate and deletes them; that statement is dollar-quoted and
passed as the command argument of ``cron.schedule``.
"""
from purge_scheduler.services import identifiers
from purge_scheduler.services.filter_clause_builder import TABLE_ALIAS

CTE_NAME = f"{TABLE_ALIAS}_cte"
DOLLAR_QUOTE = "$$"


def registered_job_name(database_name: str, job_name: str) -> str:
    """Name the job is registered under in cron.job."""
    database_name = identifiers.name_token("database_name", database_name)
    job_name = identifiers.name_token("job_name", job_name)
    return f"{database_name}-{job_name}-job"


def build_purge_query(schema: str, table: str, where_clause: str, limit: int) -> str:
    """Dollar-quoted batch delete for ``schema.table``."""
    schema = identifiers.sql_identifier("schema", schema)
    table = identifiers.sql_identifier("table", table)
    target = f"{schema}.\"{table}\" {TABLE_ALIAS}"

    return (
        f"{DOLLAR_QUOTE} with {CTE_NAME} as (select {TABLE_ALIAS}.\"Id\" from {target} "
        f"WHERE {where_clause} LIMIT {int(limit)}) "
        f"delete from {target} where {TABLE_ALIAS}.\"Id\" in (select \"Id\" from {CTE_NAME});{DOLLAR_QUOTE}"
    )


def render_schedule_statement(
    registered_name: str,
    database_name: str,
    cron_expression: str,
    purge_query: str,
) -> str:
    """
    Format the ``SELECT cron.schedule(...)`` call.

    Names are interpolated as given; callers pass a name returned by
    ``registered_job_name`` so both names have already been checked.
    """
    return f"SELECT cron.schedule('{registered_name}', '{cron_expression}', {purge_query}, '{database_name}');"


def build_schedule_statement(
    database_name: str,
    job_name: str,
    cron_expression: str,
    purge_query: str,
) -> str:
    """Wrap a purge query in ``SELECT cron.schedule(...)``."""
    name = registered_job_name(database_name, job_name)
    return render_schedule_statement(name, database_name, cron_expression, purge_query)
