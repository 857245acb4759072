"""Unit tests for bundle summary reporting."""

from cefbundle.build.build_utils import BundleSummaryPrinter, format_size
from cefbundle.build.materializer import MaterializeReport
from cefbundle.build.orchestrator import BundleResult
from cefbundle.deploy.relocator import RelocationReport
from cefbundle.packages.source_locator import SourceRoot


def make_result(tmp_path, warnings=None):
    final = tmp_path / "dist"
    (final / "locales").mkdir(parents=True)
    (final / "demo").write_bytes(b"x" * 1000)
    (final / "locales" / "en-US.pak").write_bytes(b"y" * 24)
    return BundleResult(
        final_output_dir=final,
        executable_path=final / "demo",
        source_root=SourceRoot(cef_path=tmp_path, bin_dir=tmp_path),
        materialize_report=MaterializeReport(copied=["lib.so"], locales=["en-US.pak"]),
        relocation_report=RelocationReport(
            final_output_dir=final, moved=["demo", "locales"], skipped=["demo.pdb"]
        ),
        total_time=1.5,
        warnings=warnings or [],
    )


class TestFormatSize:
    def test_bytes(self):
        assert format_size(512) == "512 bytes"

    def test_kilobytes(self):
        assert format_size(1536) == "1.50 KB"

    def test_megabytes(self):
        assert format_size(5 * 1024 * 1024) == "5.00 MB"

    def test_gigabytes(self):
        assert format_size(3 * 1024 ** 4) == "3072.00 GB"


class TestBundleSummaryPrinter:
    """Tests for BundleSummaryPrinter."""

    def test_summary_lines(self, tmp_path):
        lines = BundleSummaryPrinter.summary_lines(make_result(tmp_path))

        assert lines[0] == "BUNDLE COMPLETE"
        assert f"Output: {tmp_path / 'dist'}" in lines
        assert "Executable: demo" in lines
        assert "Entries moved: 2" in lines
        assert "Debug symbols left in build directory: demo.pdb" in lines
        assert "Locales: 1" in lines
        assert "Bundle size: 1.00 KB" in lines
        assert not any(line.startswith("Warnings") for line in lines)

    def test_summary_counts_warnings(self, tmp_path):
        lines = BundleSummaryPrinter.summary_lines(make_result(tmp_path, warnings=["a", "b"]))
        assert "Warnings: 2" in lines

    def test_print_summary(self, tmp_path, capsys):
        BundleSummaryPrinter.print_summary(make_result(tmp_path))
        out = capsys.readouterr().out

        assert "=" * 60 in out
        assert "  BUNDLE COMPLETE" in out

    def test_print_summary_verbose_lists_files(self, tmp_path, capsys):
        BundleSummaryPrinter.print_summary(make_result(tmp_path), verbose=True)
        out = capsys.readouterr().out

        assert "Bundle contents:" in out
        assert "demo (1000 bytes)" in out
