# canyonsql

`canyonsql` builds SQL statements for entities described in your own code,
keeps track of the values bound to their `$n` placeholders, and rewrites
those statements for PostgreSQL, SQL Server or MySQL.

## A short example

```python
from canyonsql.entities import CanyonEntity, EntityField
from canyonsql.operators import Comp
from canyonsql.query_builder import SelectQueryBuilder

league = CanyonEntity(
    "League",
    [
        EntityField.from_declaration("id", "i32", [("primary_key", None)]),
        EntityField.from_declaration("slug", "String"),
    ],
)
LeagueField = league.field_enum()

builder = SelectQueryBuilder(None, "league")
builder.where(league.field_value("id", 1), Comp.GT).order_by(LeagueField.slug, True)

builder.read_sql()  # "SELECT * FROM league WHERE id > $1 ORDER BY slug DESC "
builder.params      # [1]
```

## Modules

- `canyonsql.operators`: `DatabaseType` (`POSTGRESQL`, `SQLSERVER`,
  `MYSQL`), the `Operator` protocol, and the `Comp` (`=`, `<>`, `>`, `>=`,
  `<`, `<=`) and `Like` (`FULL`, `LEFT`, `RIGHT`) operators. Each renders
  itself with `as_str(placeholder_counter, datasource_type)`; `Like` casts its
  value to `VARCHAR`, or to `CHAR` on MySQL.
- `canyonsql.bounds`: `Column` and `ColumnType` describe result columns.
  `FieldIdentifier` is a mixin for enums whose members name entity fields
  (`as_str()` returns the member name); `FieldValueIdentifier` pairs a column
  name with a parameter value (`value()`); `ForeignKeyable` is a mixin whose
  `get_fk_column(column)` returns the value of a public attribute, or `None`.
- `canyonsql.params`: `is_query_parameter(value)` accepts `None`, booleans,
  64-bit integers, floats, strings, dates, times and date-times.
  `to_sqlserver_param(value)` turns such a value into a `ColumnData` of the
  matching `ColumnData.Kind` (`I32` or `I64` by range, `DATETIMEOFFSET` for
  aware date-times); it raises `TypeError` for other types and `ValueError`
  for integers outside the 64-bit range.
- `canyonsql.rows`: `CanyonRows`, the rows of a result tagged with their
  `DatabaseType`. `into_results(mapper)` calls the mapper's
  `deserialize_postgresql`, `deserialize_sqlserver` or `deserialize_mysql` on
  every row; `rows_for(database_type)` returns the raw rows or raises
  `ValueError` if they came from another engine; `len()` and `is_empty()`
  count them.
- `canyonsql.config`: `find_config_file(root=".")` returns the first
  `canyon*.toml` file at most two levels below `root` (in name order) or raises
  `FileNotFoundError`. `get_database_config(name, datasources)` picks the
  datasource with that `name` attribute, the first one for an empty name.
  `ConnectionCache` keeps connections by datasource name; `get("")` returns
  the default datasource's connection (`default_datasource`, else the first
  inserted). Missing names raise `DatasourceNotFoundError`.
- `canyonsql.statements`: `sqlserver_statement(stmt)` turns
  `... VALUES ... RETURNING cols` into `... OUTPUT inserted.cols VALUES ...`
  and `$n` into `@Pn`. `mysql_statement(stmt)` replaces `$n` with `?`, drops
  double quotes and backslashes, and cuts off a ` RETURNING` clause, returning
  a `MySqlStatement(sql, is_insert)`. `reorder_params(stmt, params, parser)`
  returns the parsed parameters in placeholder order, raising `IndexError` for
  a placeholder with no parameter.
- `canyonsql.query_builder`: `Query`, `QueryBuilder` and the
  `SelectQueryBuilder`, `UpdateQueryBuilder` and `DeleteQueryBuilder`
  builders. They share `where`, `and_`, `or_`, `and_values_in`,
  `or_values_in`, `order_by`, `push_sql`, `read_sql` and the `params`
  property. The select builder adds `left_join`, `inner_join`, `right_join`
  and `full_join`; the update builder adds `set(columns)`, which raises
  `ValueError` when the statement already has a `SET`; on the delete builder
  `and_values_in` joins its `IN` filter with `OR`. The awaitable `query()`
  appends `;`, awaits `entity.query(sql, params, datasource_name)` and maps
  the returned `CanyonRows` with the entity.
- `canyonsql.entities`: `parse_annotation(name, args)` reads
  `primary_key` (a bare one is autoincremental) and `foreign_key` (needs
  string `table` and `column`) into `PrimaryKey` and `ForeignKey`.
  `EntityField.from_declaration(...)` and `CanyonEntity` describe an entity;
  `field_enum()` builds its `<Name>Field` enum and `field_value(...)` a
  `FieldValueIdentifier`. `CanyonRegisterEntity` and
  `CanyonRegisterEntityField` are stored with `register_entity(...)` and read
  back with `registered_entities()`; a field reports `is_nullable()` and
  `is_autoincremental()` (a numeric type with an autoincremental primary key).
  Malformed declarations raise `EntityError`.

## What it does not do

The package contains no database drivers and opens no connections: it does
not read the contents of the configuration file it finds, and running a built
query needs an entity object that supplies its own `query` coroutine and row
deserializers. There is no command-line tool.

## Requirements

Python 3.10 or later, with no third-party dependencies. The `test` extra
installs pytest and pytest-asyncio.