"""Tests for multi-file processing."""

from fdoc import MismatchedCloseError, ParseConfig, process_files

from conftest import SUM_MODULE_DEFAULT

CONFIG = ParseConfig.create("default", comment_prefix="!")


class TestProcessFiles:
    def test_results_in_input_order(self, write_source):
        paths = [
            write_source("a.f90", SUM_MODULE_DEFAULT),
            write_source("b.f90", "PROGRAM b\nEND PROGRAM b\n"),
        ]
        results = process_files(paths, CONFIG)
        assert [r.path for r in results] == paths
        assert all(r.ok for r in results)
        assert len(results[0].document.entries) == 2
        assert results[1].document.is_empty

    def test_bad_file_does_not_affect_others(self, write_source):
        good = write_source("good.f90", SUM_MODULE_DEFAULT)
        bad = write_source("bad.f90", ":description+:\nx\n:author-:\n")
        results = process_files([bad, good], CONFIG)
        assert not results[0].ok
        assert isinstance(results[0].error, MismatchedCloseError)
        assert results[0].document is None
        assert results[1].ok

    def test_missing_file_reported(self, tmp_path):
        results = process_files([tmp_path / "nope.f90"], CONFIG)
        assert isinstance(results[0].error, OSError)

    def test_parallel_matches_sequential(self, write_source):
        paths = [write_source(f"m{i}.f90", SUM_MODULE_DEFAULT) for i in range(6)]
        sequential = process_files(paths, CONFIG, jobs=1)
        parallel = process_files(paths, CONFIG, jobs=3)
        assert [r.document for r in parallel] == [r.document for r in sequential]

    def test_on_done_called_per_file(self, write_source):
        paths = [write_source(f"m{i}.f90", SUM_MODULE_DEFAULT) for i in range(3)]
        seen = []
        process_files(paths, CONFIG, jobs=2, on_done=seen.append)
        assert sorted(r.path for r in seen) == sorted(paths)
