# =============================================================================
# Unit Tests: Jobs and Definitions
# =============================================================================

import pyarrow.parquet as pq

from services.dagster.osmload_pipelines.definitions import defs
from services.dagster.osmload_pipelines.jobs import osm_import_job, osm_parquet_export_job


def test_import_job_ops():
    names = {node.name for node in osm_import_job.graph.nodes}
    assert names == {"prepare_osm_schema", "import_osm_elements", "materialize_osm_geometries"}


def test_definitions_register_jobs():
    assert defs.get_job_def("osm_import_job").name == "osm_import_job"
    assert defs.get_job_def("osm_parquet_export_job").name == "osm_parquet_export_job"


def test_parquet_export_job_end_to_end(sample_osm_file, tmp_path):
    out_dir = tmp_path / "out"

    result = osm_parquet_export_job.execute_in_process(
        run_config={
            "ops": {
                "export_osm_parquet": {
                    "config": {
                        "input_path": str(sample_osm_file),
                        "output_dir": str(out_dir),
                        "bbox": "0,0,1,1",
                    }
                }
            }
        }
    )

    assert result.success
    export = result.output_for_node("export_osm_parquet", "export_result")
    assert export["row_counts"] == {"points": 2, "ways": 1, "relations": 1, "relation_members": 3}
    assert export["relations_dropped"] == 1

    members = pq.read_table(out_dir / "relation_members.parquet").to_pylist()
    assert [(m["member_id"], m["member_type_id"], m["sequence_id"]) for m in members] == [
        (1, 1, 0),
        (10, 2, 1),
        (500, 3, 2),
    ]
