# =============================================================================
# Unit Tests: PostgreSQL COPY Sink
# =============================================================================

import pytest
from unittest.mock import MagicMock

import psycopg2

from osmload.errors import SinkError
from osmload.models import MemberRow, PointRow, RelationRow, WayRow
from osmload.sinks import PostgresCopySink
from osmload.sinks.postgis import encode_copy_row, encode_copy_value


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def mock_connection():
    """psycopg2 connection whose cursor() works as a context manager."""
    return MagicMock()


def _cursor(connection):
    return connection.cursor.return_value.__enter__.return_value


def _copied_chunks(connection):
    """Text of every chunk handed to copy_expert, in order."""
    return [c.args[1].getvalue() for c in _cursor(connection).copy_expert.call_args_list]


# =============================================================================
# Test: Value Encoding
# =============================================================================

class TestEncodeCopyValue:
    """COPY text-format encoding."""

    def test_null(self):
        assert encode_copy_value(None) == "\\N"

    def test_numbers(self):
        assert encode_copy_value(42) == "42"
        assert encode_copy_value(-7) == "-7"
        assert encode_copy_value(9.5) == "9.5"
        assert encode_copy_value(55.123456789) == "55.123456789"

    def test_array(self):
        assert encode_copy_value((1, 2, 3)) == "{1,2,3}"
        assert encode_copy_value([]) == "{}"

    def test_json_tags(self):
        assert encode_copy_value({"a": "1"}) == '{"a":"1"}'

    def test_text_escaping(self):
        assert encode_copy_value("a\tb\nc\\d\re") == "a\\tb\\nc\\\\d\\re"

    def test_json_with_escaped_newline(self):
        # json.dumps yields a literal backslash-n, which COPY needs doubled
        assert encode_copy_value({"note": "x\ny"}) == '{"note":"x\\\\ny"}'

    def test_unsupported_type(self):
        with pytest.raises(SinkError):
            encode_copy_value(object())

    def test_row(self):
        line = encode_copy_row(MemberRow(100, 1, 1, "stop", 0))
        assert line == "100\t1\t1\tstop\t0\n"


# =============================================================================
# Test: PostgresCopySink
# =============================================================================

class TestPostgresCopySink:
    """Buffered COPY with a mocked connection."""

    def test_copy_sql(self, mock_connection):
        sink = PostgresCopySink(mock_connection, "osm", "relation_members")
        assert sink.copy_sql == (
            'COPY "osm"."relation_members" '
            "(rel_id, member_id, member_type_id, role, sequence_id) FROM STDIN"
        )

    def test_rows_flushed_on_finish_and_committed(self, mock_connection):
        sink = PostgresCopySink(mock_connection, "osm", "points")
        sink.write(PointRow(1, 9.5, 55.25, None))
        sink.write(PointRow(2, 10.0, 56.0, {"amenity": "bench"}))

        _cursor(mock_connection).copy_expert.assert_not_called()
        assert sink.finish() == 2

        assert _copied_chunks(mock_connection) == [
            '1\t9.5\t55.25\t\\N\n2\t10.0\t56.0\t{"amenity":"bench"}\n'
        ]
        mock_connection.commit.assert_called_once()

    def test_flushes_every_buffer_rows(self, mock_connection):
        sink = PostgresCopySink(mock_connection, "osm", "ways", buffer_rows=2)
        for way_id in range(5):
            sink.write(WayRow(way_id, (1, 2), None))
        sink.finish()

        chunks = _copied_chunks(mock_connection)
        assert [chunk.count("\n") for chunk in chunks] == [2, 2, 1]
        assert chunks[0].startswith("0\t{1,2}\t\\N\n")

    def test_empty_sink_commits_without_copy(self, mock_connection):
        sink = PostgresCopySink(mock_connection, "osm", "relations")
        assert sink.finish() == 0

        _cursor(mock_connection).copy_expert.assert_not_called()
        mock_connection.commit.assert_called_once()

    def test_copy_failure_raises_sink_error(self, mock_connection):
        _cursor(mock_connection).copy_expert.side_effect = psycopg2.Error("relation does not exist")
        sink = PostgresCopySink(mock_connection, "osm", "relations", buffer_rows=1)

        with pytest.raises(SinkError, match="COPY into osm.relations failed"):
            sink.write(RelationRow(1, 2, None))

    def test_commit_failure_raises_sink_error(self, mock_connection):
        mock_connection.commit.side_effect = psycopg2.Error("connection lost")
        sink = PostgresCopySink(mock_connection, "osm", "points")

        with pytest.raises(SinkError, match="Commit"):
            sink.finish()

    def test_unknown_table(self, mock_connection):
        with pytest.raises(ValueError, match="Unknown table"):
            PostgresCopySink(mock_connection, "osm", "nodes")

    def test_invalid_schema(self, mock_connection):
        with pytest.raises(ValueError):
            PostgresCopySink(mock_connection, "osm; drop", "points")

    def test_invalid_buffer_rows(self, mock_connection):
        with pytest.raises(ValueError):
            PostgresCopySink(mock_connection, "osm", "points", buffer_rows=0)
