"""Unit tests for document outputs."""

from unittest.mock import patch

import pytest

from solid_guide.config.defaults import OutputParams
from solid_guide.errors import OutputError
from solid_guide.output import (
    FileOutput,
    OutputStatus,
    StdoutOutput,
    create_output,
)
from solid_guide.renderer import RenderedDocument


@pytest.fixture
def document():
    return RenderedDocument(text="# Guide\n\nbody\n", principles=["S"])


class TestCreateOutput:
    """Test output selection."""

    def test_stdout(self):
        assert isinstance(create_output(OutputParams(method="stdout")), StdoutOutput)

    def test_file(self, tmp_path):
        output = create_output(OutputParams(method="file", path=str(tmp_path / "g.md")))
        assert isinstance(output, FileOutput)

    def test_unknown_method(self):
        with pytest.raises(OutputError) as exc_info:
            create_output(OutputParams(method="ftp"))
        assert exc_info.value.output_name == "ftp"


class TestStdoutOutput:
    """Test stdout output."""

    def test_write(self, document, capsys):
        output = StdoutOutput("stdout", OutputParams())

        result = output.write(document)

        assert result.status == OutputStatus.SUCCESS
        assert result.bytes_written == len(document.text)
        assert capsys.readouterr().out == document.text

    def test_write_failure(self, document):
        output = StdoutOutput("stdout", OutputParams())
        with patch("sys.stdout") as stdout:
            stdout.write.side_effect = OSError("broken pipe")
            result = output.write(document)

        assert result.status == OutputStatus.FAILED
        assert "broken pipe" in result.message
        assert output.get_stats()["error_count"] == 1

    def test_health_check(self):
        assert StdoutOutput("stdout", OutputParams()).health_check() is True


class TestFileOutput:
    """Test file output."""

    def test_write_creates_parent_dirs(self, document, tmp_path):
        path = tmp_path / "docs" / "guide" / "SOLID.md"
        output = FileOutput("file", OutputParams(method="file", path=str(path)))

        result = output.write(document)

        assert result.ok
        assert result.target == str(path)
        assert path.read_text(encoding="utf-8") == document.text
        assert not path.with_suffix(".md.tmp").exists()

    def test_overwrite_allowed(self, document, tmp_path):
        path = tmp_path / "SOLID.md"
        path.write_text("old")
        output = FileOutput("file", OutputParams(method="file", path=str(path)))

        assert output.write(document).ok
        assert path.read_text(encoding="utf-8") == document.text

    def test_overwrite_refused(self, document, tmp_path):
        path = tmp_path / "SOLID.md"
        path.write_text("old")
        output = FileOutput(
            "file", OutputParams(method="file", path=str(path), overwrite=False)
        )

        result = output.write(document)

        assert result.status == OutputStatus.FAILED
        assert "Refusing to overwrite" in result.message
        assert path.read_text() == "old"

    def test_missing_parent_without_create_dirs(self, document, tmp_path):
        path = tmp_path / "missing" / "SOLID.md"
        output = FileOutput(
            "file", OutputParams(method="file", path=str(path), create_dirs=False)
        )

        assert output.health_check() is False
        result = output.write(document)

        assert result.status == OutputStatus.FAILED
        assert isinstance(result.error, OSError)

    def test_failed_replace_leaves_no_temp_file(self, document, tmp_path):
        path = tmp_path / "SOLID.md"
        path.mkdir()
        output = FileOutput("file", OutputParams(method="file", path=str(path)))

        result = output.write(document)

        assert result.status == OutputStatus.FAILED
        assert isinstance(result.error, OSError)
        assert path.is_dir()
        assert list(tmp_path.iterdir()) == [path]

    @pytest.mark.parametrize("value", [".", "/", ".."])
    def test_path_without_file_name(self, document, value):
        output = FileOutput("file", OutputParams(method="file", path=value))

        result = output.write(document)

        assert result.status == OutputStatus.FAILED
        assert "does not name a file" in result.message

    def test_health_check_with_create_dirs(self, tmp_path):
        output = FileOutput(
            "file", OutputParams(method="file", path=str(tmp_path / "a" / "b" / "c.md"))
        )
        assert output.health_check() is True

    def test_stats(self, document, tmp_path):
        path = tmp_path / "SOLID.md"
        output = FileOutput(
            "file", OutputParams(method="file", path=str(path), overwrite=False)
        )

        output.write(document)
        output.write(document)

        stats = output.get_stats()
        assert stats == {
            "name": "file",
            "write_count": 1,
            "error_count": 1,
            "success_rate": 0.5,
        }

        output.reset_stats()
        assert output.get_stats()["success_rate"] == 0.0
