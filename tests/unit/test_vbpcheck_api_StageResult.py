"""Unit tests for vbpcheck.api.StageResult module."""

from collections.abc import Iterator

from vbpcheck.api.StageResult import StageResult


def test_stage_result_initialization():
    """Test that StageResult initializes correctly."""

    def progress_gen(result: StageResult) -> Iterator[tuple[float, str]]:
        yield (1.0, "Complete")
        result.finish("Done", {"test": True}, True)

    result = StageResult(
        announce="Testing",
        progress_callback=progress_gen,
    )
    assert result.announce == "Testing"
    assert result.result == ""
    assert result.output == {}
    assert result.success is False

    assert list(result.progress_callback(result)) == [(1.0, "Complete")]
    assert result.result == "Done"
    assert result.success is True


def test_finish_records_failure():
    result = StageResult(announce="Testing", progress_callback=lambda r: iter(()))

    result.finish("Nothing to do", {"errors": ["Nothing to do"]}, False)

    assert result.result == "Nothing to do"
    assert result.output == {"errors": ["Nothing to do"]}
    assert result.success is False
