# =============================================================================
# Post-Import Steps
# =============================================================================
# Concrete steps: statistics, b-tree and GIST indexes, and materialization
# of point/line/polygon geometry tables from the raw element tables.
# Raw coordinates are EPSG:4326; geometries are transformed when the
# target SRID differs.
# =============================================================================

from typing import Sequence

from osmload.schema import quote_identifier, validate_identifier

from .base import PostImportStep

__all__ = [
    "AnalyzeTableStep",
    "CreateIndexStep",
    "CreateSpatialIndexStep",
    "VacuumTableStep",
    "MaterializePointsStep",
    "MaterializeLinesStep",
    "MaterializePolygonsStep",
    "SOURCE_SRID",
]

SOURCE_SRID = 4326


def _point_expr(lon: str, lat: str) -> str:
    return f"st_setsrid(st_makepoint({lon}, {lat}), {SOURCE_SRID})"


def _to_srid(expr: str, srid: int) -> str:
    if srid == SOURCE_SRID:
        return expr
    return f"st_transform({expr}, {srid})"


def _validate_srid(srid: int) -> None:
    if not isinstance(srid, int) or srid <= 0:
        raise ValueError(f"Invalid srid: {srid}")


class AnalyzeTableStep(PostImportStep):
    """Refresh planner statistics for one table."""

    def __init__(self, table: str):
        validate_identifier(table, "table")
        self.table = table

    def generate_sql(self, schema: str) -> str:
        return f"analyze {quote_identifier(schema, 'schema')}.{quote_identifier(self.table)}"

    @property
    def description(self) -> str:
        return f"Analyzing {self.table}"


class VacuumTableStep(PostImportStep):
    """
    Reclaim space in a table after bulk deletes.

    VACUUM cannot run inside a transaction block, hence autocommit.
    """

    requires_autocommit = True

    def __init__(self, table: str, full: bool = True):
        validate_identifier(table, "table")
        self.table = table
        self.full = full

    def generate_sql(self, schema: str) -> str:
        full = "full " if self.full else ""
        return f"vacuum {full}{quote_identifier(schema, 'schema')}.{quote_identifier(self.table)}"

    @property
    def description(self) -> str:
        return f"Vacuum {self.table}"


class CreateIndexStep(PostImportStep):
    """
    Create a b-tree index on one or more columns.

    Args:
        table: Table to index
        columns: Indexed columns, in order
        name: Index name (default: <table>_<col1>_<col2>..._idx)
    """

    def __init__(self, table: str, columns: Sequence[str], name: str | None = None):
        if not columns:
            raise ValueError("CreateIndexStep needs at least one column")
        validate_identifier(table, "table")
        for column in columns:
            validate_identifier(column, "column")
        self.table = table
        self.columns = tuple(columns)
        self.name = name or f"{table}_{'_'.join(columns)}_idx"
        validate_identifier(self.name, "index name")

    def generate_sql(self, schema: str) -> str:
        cols = ", ".join(quote_identifier(c) for c in self.columns)
        return (
            f"create index {quote_identifier(self.name)} on "
            f"{quote_identifier(schema, 'schema')}.{quote_identifier(self.table)} ({cols})"
        )

    @property
    def description(self) -> str:
        return f"Creating {self.name}"


class CreateSpatialIndexStep(PostImportStep):
    """Create a GIST index on a geometry column."""

    def __init__(self, table: str, geom_column: str = "geom"):
        validate_identifier(table, "table")
        validate_identifier(geom_column, "geom_column")
        self.table = table
        self.geom_column = geom_column

    def generate_sql(self, schema: str) -> str:
        name = quote_identifier(f"{self.table}_{self.geom_column}_idx")
        return (
            f"create index {name} on "
            f"{quote_identifier(schema, 'schema')}.{quote_identifier(self.table)} "
            f"using gist ({quote_identifier(self.geom_column)})"
        )

    @property
    def description(self) -> str:
        return f"Creating {self.table} spatial index"


class MaterializePointsStep(PostImportStep):
    """Create point geometries for tagged points (untagged ones are way vertices)."""

    def __init__(self, srid: int = SOURCE_SRID):
        _validate_srid(srid)
        self.srid = srid

    def generate_sql(self, schema: str) -> str:
        s = quote_identifier(schema, "schema")
        geom = _to_srid(_point_expr("lon", "lat"), self.srid)
        return f"""insert into {s}.points_geom
select id, {geom}
from {s}.points where tags is not null"""

    @property
    def description(self) -> str:
        return "Creating points_geom"


class MaterializeLinesStep(PostImportStep):
    """Create one linestring per way, vertices in reference order."""

    def __init__(self, srid: int = SOURCE_SRID):
        _validate_srid(srid)
        self.srid = srid

    def generate_sql(self, schema: str) -> str:
        s = quote_identifier(schema, "schema")
        line = _to_srid(
            f"st_makeline({_point_expr('p.lon', 'p.lat')} order by r.ordinality)",
            self.srid,
        )
        return f"""insert into {s}.ways_lines
select w.id, {line} geom
from {s}.ways w
cross join lateral unnest(w.refs) with ordinality as r(point_id, ordinality)
join {s}.points p on (p.id = r.point_id)
group by w.id
having count(*) > 1"""

    @property
    def description(self) -> str:
        return "Creating ways_lines"


class MaterializePolygonsStep(PostImportStep):
    """
    Move closed area lines from ways_lines into ways_polygons.

    A closed line with more than 3 points is an area when tagged area=yes,
    or when tagged barrier and not highway.
    """

    def generate_sql(self, schema: str) -> str:
        s = quote_identifier(schema, "schema")
        return f"""with moved_rows as (
    delete
    from {s}.ways_lines l
    using {s}.ways w
    where
        w.id = l.id and
        st_npoints(l.geom) > 3 and
        st_isclosed(l.geom) and (
            not (
                coalesce(w.tags, '{{}}'::jsonb) ? 'highway' or
                not coalesce(w.tags, '{{}}'::jsonb) ? 'barrier'
            ) or
            w.tags->>'area' = 'yes'
        )
    returning l.*
)
insert into {s}.ways_polygons
select id, st_makepolygon(geom) from moved_rows"""

    @property
    def description(self) -> str:
        return "Creating ways_polygons from closed lines"
