"""Fluent builders for SELECT, UPDATE and DELETE statements."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from canyonsql.bounds import FieldIdentifier, FieldValueIdentifier
from canyonsql.operators import DatabaseType, Operator


@dataclass
class Query:
    """An SQL sentence and the parameters bound to its placeholders."""

    sql: str
    params: list[Any] = field(default_factory=list)


class QueryBuilder:
    """Builds an SQL sentence step by step and runs it for an entity type.

    ``entity`` must provide an awaitable ``query(sql, params, datasource_name)``
    returning :class:`canyonsql.rows.CanyonRows`, and the deserializer
    methods used by :meth:`CanyonRows.into_results`.
    """

    def __init__(
        self,
        entity: Any,
        query: Query,
        datasource_name: str = "",
        datasource_type: DatabaseType = DatabaseType.POSTGRESQL,
    ) -> None:
        self.entity = entity
        self._query = query
        self.datasource_name = datasource_name
        self.datasource_type = datasource_type

    @property
    def params(self) -> list[Any]:
        """A copy of the parameters collected so far."""
        return list(self._query.params)

    def read_sql(self) -> str:
        """Return the SQL sentence built so far."""
        return self._query.sql

    def push_sql(self, sql: str) -> QueryBuilder:
        """Append raw SQL to the sentence."""
        self._query.sql += sql
        return self

    def _filter(self, keyword: str, column: FieldValueIdentifier, op: Operator) -> QueryBuilder:
        column_name, value = column.value()
        placeholder = len(self._query.params) + 1
        self._query.sql += f" {keyword} {column_name}{op.as_str(placeholder, self.datasource_type)}"
        self._query.params.append(value)
        return self

    def where(self, column: FieldValueIdentifier, op: Operator) -> QueryBuilder:
        """Add a ``WHERE`` filter on the column and value of ``column``."""
        return self._filter("WHERE", column, op)

    def and_(self, column: FieldValueIdentifier, op: Operator) -> QueryBuilder:
        """Add an ``AND`` filter on the column and value of ``column``."""
        return self._filter("AND", column, op)

    def or_(self, column: FieldValueIdentifier, op: Operator) -> QueryBuilder:
        """Add an ``OR`` filter on the column and value of ``column``."""
        return self._filter("OR", column, op)

    def _values_in(
        self, keyword: str, column: FieldIdentifier, values: Sequence[Any]
    ) -> QueryBuilder:
        if not values:
            return self
        placeholders = []
        for value in values:
            # The placeholder takes the parameter count before the push.
            placeholders.append(f"${len(self._query.params)}")
            self._query.params.append(value)
        self._query.sql += f" {keyword} {column.as_str()} IN ({', '.join(placeholders)})"
        return self

    def and_values_in(self, column: FieldIdentifier, values: Sequence[Any]) -> QueryBuilder:
        """Add ``AND <column> IN (...)``; nothing is added for no values."""
        return self._values_in("AND", column, values)

    def or_values_in(self, column: FieldIdentifier, values: Sequence[Any]) -> QueryBuilder:
        """Add ``OR <column> IN (...)``; nothing is added for no values."""
        return self._values_in("OR", column, values)

    def order_by(self, column: FieldIdentifier, desc: bool) -> QueryBuilder:
        """Add an ``ORDER BY`` clause, descending when ``desc`` is true."""
        suffix = " DESC " if desc else ""
        self._query.sql += f" ORDER BY {column.as_str()}{suffix}"
        return self

    async def query(self) -> list[Any]:
        """Terminate the sentence, run it and map the rows to entities."""
        self._query.sql += ";"
        rows = await self.entity.query(
            self._query.sql, list(self._query.params), self.datasource_name
        )
        return rows.into_results(self.entity)


class SelectQueryBuilder(QueryBuilder):
    """Builder for ``SELECT * FROM`` statements, with joins."""

    def __init__(
        self,
        entity: Any,
        table_schema_data: str,
        datasource_name: str = "",
        datasource_type: DatabaseType = DatabaseType.POSTGRESQL,
    ) -> None:
        super().__init__(
            entity, Query(f"SELECT * FROM {table_schema_data}"), datasource_name, datasource_type
        )

    def _join(self, kind: str, join_table: str, col1: str, col2: str) -> SelectQueryBuilder:
        self._query.sql += f" {kind} JOIN {join_table} ON {col1} = {col2}"
        return self

    def left_join(self, join_table: str, col1: str, col2: str) -> SelectQueryBuilder:
        """Add a ``LEFT JOIN``; the order of the columns does not matter."""
        return self._join("LEFT", join_table, col1, col2)

    def inner_join(self, join_table: str, col1: str, col2: str) -> SelectQueryBuilder:
        """Add an ``INNER JOIN``; the order of the columns does not matter."""
        return self._join("INNER", join_table, col1, col2)

    def right_join(self, join_table: str, col1: str, col2: str) -> SelectQueryBuilder:
        """Add a ``RIGHT JOIN``; the order of the columns does not matter."""
        return self._join("RIGHT", join_table, col1, col2)

    def full_join(self, join_table: str, col1: str, col2: str) -> SelectQueryBuilder:
        """Add a ``FULL JOIN``; the order of the columns does not matter."""
        return self._join("FULL", join_table, col1, col2)


class UpdateQueryBuilder(QueryBuilder):
    """Builder for ``UPDATE`` statements."""

    def __init__(
        self,
        entity: Any,
        table_schema_data: str,
        datasource_name: str = "",
        datasource_type: DatabaseType = DatabaseType.POSTGRESQL,
    ) -> None:
        super().__init__(
            entity, Query(f"UPDATE {table_schema_data}"), datasource_name, datasource_type
        )

    def set(self, columns: Iterable[tuple[FieldIdentifier, Any]]) -> UpdateQueryBuilder:
        """Add the ``SET`` clause with every column and its new value.

        All columns must be given in one call; a second ``SET`` raises
        ValueError.
        """
        columns = list(columns)
        if not columns:
            return self
        if "SET" in self._query.sql:
            raise ValueError(
                "Don't use chained calls of the .set(...) method. Pass all the "
                "values in a unique call within the 'columns' parameter"
            )
        assignments = []
        for column, value in columns:
            assignments.append(f"{column.as_str()} = ${len(self._query.params) + 1}")
            self._query.params.append(value)
        self._query.sql += " SET " + ", ".join(assignments)
        return self


class DeleteQueryBuilder(QueryBuilder):
    """Builder for ``DELETE FROM`` statements."""

    def __init__(
        self,
        entity: Any,
        table_schema_data: str,
        datasource_name: str = "",
        datasource_type: DatabaseType = DatabaseType.POSTGRESQL,
    ) -> None:
        super().__init__(
            entity, Query(f"DELETE FROM {table_schema_data}"), datasource_name, datasource_type
        )

    def and_values_in(self, column: FieldIdentifier, values: Sequence[Any]) -> DeleteQueryBuilder:
        """Add an ``IN`` filter; on deletes it is joined with ``OR``."""
        return self._values_in("OR", column, values)