import pytest

from filestore.errors import InvalidEncodingError, InvalidNameError, ReadError, SourceNotFoundError
from filestore.intake import IntakeReader


class TestIntakeReader:
    def test_read_returns_text(self, intake_dir):
        (intake_dir / "report.txt").write_text("hello", encoding="utf-8")
        assert IntakeReader(intake_dir).read("report.txt") == "hello"

    def test_read_nested(self, intake_dir):
        (intake_dir / "sub").mkdir()
        (intake_dir / "sub" / "data.csv").write_text("a,b\n1,2\n", encoding="utf-8")
        assert IntakeReader(str(intake_dir)).read("sub/data.csv") == "a,b\n1,2\n"

    def test_missing_file(self, intake_dir):
        with pytest.raises(SourceNotFoundError, match="File not found"):
            IntakeReader(intake_dir).read("absent.txt")

    def test_directory_is_not_a_source(self, intake_dir):
        (intake_dir / "sub").mkdir()
        with pytest.raises(SourceNotFoundError):
            IntakeReader(intake_dir).read("sub")

    def test_invalid_utf8(self, intake_dir):
        (intake_dir / "bad.txt").write_bytes(b"\xff\xfe\x00")
        with pytest.raises(InvalidEncodingError, match="bad.txt"):
            IntakeReader(intake_dir).read("bad.txt")

    def test_os_error_becomes_read_error(self, intake_dir, monkeypatch):
        (intake_dir / "locked.txt").write_text("x", encoding="utf-8")

        def _raise(self):
            raise PermissionError("permission denied")

        monkeypatch.setattr("pathlib.Path.read_bytes", _raise)
        with pytest.raises(ReadError, match="Failed to read file"):
            IntakeReader(intake_dir).read("locked.txt")

    @pytest.mark.parametrize("name", ["../outside.txt", "/etc/passwd", "a/../../outside.txt"])
    def test_traversal_rejected(self, intake_dir, name):
        (intake_dir.parent / "outside.txt").write_text("secret", encoding="utf-8")
        with pytest.raises(InvalidNameError):
            IntakeReader(intake_dir).read(name)

    def test_list_names(self, intake_dir):
        (intake_dir / "b.txt").write_text("b", encoding="utf-8")
        (intake_dir / "a").mkdir()
        (intake_dir / "a" / "c.txt").write_text("c", encoding="utf-8")

        assert IntakeReader(intake_dir).list_names() == ["a/c.txt", "b.txt"]

    def test_list_names_missing_root(self, tmp_path):
        assert IntakeReader(tmp_path / "nope").list_names() == []

    def test_name_too_long_becomes_read_error(self, intake_dir):
        with pytest.raises(ReadError, match="Failed to read file"):
            IntakeReader(intake_dir).read("x" * 300)

    def test_file_under_a_file_is_not_a_source(self, intake_dir):
        (intake_dir / "report.txt").write_text("hello", encoding="utf-8")
        with pytest.raises(SourceNotFoundError):
            IntakeReader(intake_dir).read("report.txt/inner.txt")
