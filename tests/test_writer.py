import pytest
import sys
import os

# Add src to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

from photokml.writer import write_kml


class TestWriteKml:
    def test_writes_content(self, tmp_path):
        target = tmp_path / "out.kml"
        write_kml(b"<kml/>", target)
        assert target.read_bytes() == b"<kml/>"

    def test_creates_parent_directories(self, tmp_path):
        target = tmp_path / "nested" / "output" / "path" / "out.kml"
        assert not target.parent.exists()

        write_kml(b"<kml/>", str(target))

        assert target.exists()

    def test_truncates_existing_file(self, tmp_path):
        target = tmp_path / "out.kml"
        target.write_bytes(b"x" * 1000)

        write_kml(b"<kml/>", target)

        assert target.read_bytes() == b"<kml/>"

    def test_relative_path_without_parent(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        write_kml(b"<kml/>", "out.kml")
        assert (tmp_path / "out.kml").exists()

    def test_directory_creation_failure_propagates(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(OSError):
            write_kml(b"<kml/>", blocker / "out.kml")

    def test_target_is_directory_propagates(self, tmp_path):
        with pytest.raises(OSError):
            write_kml(b"<kml/>", tmp_path)
