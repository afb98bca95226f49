"""Tests for the moderasi command-line interface."""

import tempfile

import yaml
from click.testing import CliRunner

from moderasi.cli import main


def test_check_clean():
    result = CliRunner().invoke(main, ["check", "Aplikasi Belajar Matematika"])
    assert result.exit_code == 0
    assert "no violations" in result.output


def test_check_violation_exits_nonzero():
    result = CliRunner().invoke(main, ["check", "Proyek b0k3p", "deskripsi"])
    assert result.exit_code == 1
    assert "Konten Pornografi" in result.output
    assert "bokep" in result.output


def test_image_command():
    runner = CliRunner()
    assert runner.invoke(main, ["image", "profile_photo.jpg"]).exit_code == 0
    assert runner.invoke(main, ["image", "xxx_video.mp4"]).exit_code == 1


def test_catalog_command():
    result = CliRunner().invoke(main, ["catalog"])
    assert result.exit_code == 0
    assert "gambling" in result.output


def test_variants_command():
    result = CliRunner().invoke(main, ["variants", "SEX"])
    assert result.exit_code == 0
    assert "$3x" in result.output


def test_events_command_empty_log():
    tmpdir = tempfile.mkdtemp()
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    yaml.dump({"event_dir": tmpdir}, f)
    f.close()

    result = CliRunner().invoke(main, ["--config", f.name, "events"])
    assert result.exit_code == 0
    assert "No moderation events recorded." in result.output


def test_events_command_bad_config():
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    yaml.dump({"actions": {"high": "explode"}}, f)
    f.close()

    result = CliRunner().invoke(main, ["--config", f.name, "events"])
    assert result.exit_code != 0
    assert "Unknown action" in result.output


def test_events_command_rejects_non_positive_limit():
    tmpdir = tempfile.mkdtemp()
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    yaml.dump({"event_dir": tmpdir}, f)
    f.close()

    result = CliRunner().invoke(main, ["--config", f.name, "events", "-n", "0"])
    assert result.exit_code == 2
    assert "--limit" in result.output
