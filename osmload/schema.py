# =============================================================================
# Target Schema DDL
# =============================================================================
# Builds the idempotent DDL that prepares a PostGIS schema for an import:
# raw element tables, relation lookup tables, derived geometry tables and
# the views joining geometries back to tags. Must run before a pass.
# =============================================================================

import re

from osmload.models import MemberKind, RelationType

__all__ = ["validate_identifier", "quote_identifier", "build_schema_sql"]

_IDENTIFIER = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')


def validate_identifier(identifier: str, name: str) -> None:
    """
    Validate that an identifier matches PostgreSQL identifier allowlist.

    Args:
        identifier: Identifier to validate
        name: Name of the identifier (for error messages)

    Raises:
        ValueError: If identifier doesn't match allowlist pattern
    """
    if not isinstance(identifier, str) or not _IDENTIFIER.match(identifier):
        raise ValueError(
            f"Invalid {name}: {identifier}. "
            f"Must match pattern: ^[A-Za-z_][A-Za-z0-9_]*$"
        )


def quote_identifier(identifier: str, name: str = "identifier") -> str:
    """Validate and double-quote an identifier for SQL interpolation."""
    validate_identifier(identifier, name)
    return f'"{identifier}"'


def _seed_values(names) -> str:
    return ",\n    ".join(f"'{n}'" for n in names)


def build_schema_sql(schema: str = "osm", srid: int = 4326) -> str:
    """
    Generate the DDL that (re)creates the import schema.

    Existing tables and views of a previous import are dropped first, so
    the script can be re-run before every pass.

    Args:
        schema: Target schema name
        srid: SRID of the derived geometry tables

    Returns:
        SQL script (multiple statements)

    Raises:
        ValueError: If schema is not a safe identifier or srid is not positive
    """
    s = quote_identifier(schema, "schema")
    if not isinstance(srid, int) or srid <= 0:
        raise ValueError(f"Invalid srid: {srid}")

    rel_types = _seed_values(t.db_name for t in RelationType)
    member_types = _seed_values(k.db_name for k in MemberKind)

    return f"""
set client_min_messages = warning;
create schema if not exists {s};
drop view if exists {s}.v_points_geom;
drop view if exists {s}.v_ways_lines;
drop view if exists {s}.v_ways_polygons;
drop table if exists {s}.points_geom;
drop table if exists {s}.ways_lines;
drop table if exists {s}.ways_polygons;
drop table if exists {s}.relation_members;
drop table if exists {s}.relations;
drop table if exists {s}.ways;
drop table if exists {s}.points;
drop table if exists {s}.rel_member_types;
drop table if exists {s}.rel_types;
create table {s}.points (
    id int8 primary key,
    lon float8 not null,
    lat float8 not null,
    tags jsonb
);
create table {s}.ways (
    id int8 primary key,
    refs int8[] not null,
    tags jsonb
);
create table {s}.rel_types (
    id int2 generated always as identity primary key,
    name text not null
);
insert into {s}.rel_types (name) select unnest(array[
    {rel_types}
]);
create table {s}.relations (
    id int8 primary key,
    type_id int2 not null,
    tags jsonb,
    constraint fk_rel_type foreign key (type_id) references {s}.rel_types (id)
);
create table {s}.rel_member_types (
    id int2 generated always as identity primary key,
    name text not null
);
insert into {s}.rel_member_types (name) select unnest(array[
    {member_types}
]);
create table {s}.relation_members (
    rel_id int8 not null,
    member_id int8 not null,
    member_type_id int2 not null,
    role text,
    sequence_id int4 not null,
    constraint fk_rel_member_type foreign key (member_type_id) references {s}.rel_member_types (id)
);
create table {s}.points_geom (
    id int8 primary key,
    geom public.geometry(point, {srid}) not null
);
create table {s}.ways_lines (
    id int8 primary key,
    geom public.geometry(linestring, {srid}) not null
);
create table {s}.ways_polygons (
    id int8 primary key,
    geom public.geometry(polygon, {srid}) not null
);
create view {s}.v_points_geom as
    select g.id, g.geom, p.tags
    from {s}.points_geom g
    join {s}.points p on (p.id = g.id);
create view {s}.v_ways_lines as
    select l.id, l.geom, w.tags
    from {s}.ways_lines l
    join {s}.ways w on (w.id = l.id);
create view {s}.v_ways_polygons as
    select g.id, g.geom, w.tags
    from {s}.ways_polygons g
    join {s}.ways w on (w.id = g.id);
"""
