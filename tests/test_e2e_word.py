"""End-to-end conversions through a real Word installation.

Runs only on Windows with pywin32 installed and ``WORDBATCH_E2E=1`` set.
"""

import os
import sys

import pytest
from typer.testing import CliRunner

from wordbatch.automation import com as com_module
from wordbatch.cli import app
from wordbatch.converter.formats import TARGET_FORMATS
from wordbatch.converter.models import ExitCode

pytestmark = pytest.mark.skipif(
    sys.platform != "win32"
    or com_module.win32com is None
    or os.environ.get("WORDBATCH_E2E") != "1",
    reason="needs Windows, pywin32, Word and WORDBATCH_E2E=1",
)

runner = CliRunner()

SAMPLE_RTF = r"{\rtf1\ansi\deff0 {\fonttbl {\f0 Times New Roman;}} \f0\fs24 Hello from wordbatch.\par}"


@pytest.fixture
def sample_doc(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("pathlib.Path.home", lambda: tmp_path / "fakehome")
    source = tmp_path / "input" / "hello.doc"
    source.parent.mkdir()
    # Word sniffs the content, so RTF saved under .doc opens fine
    source.write_text(SAMPLE_RTF)
    return source


@pytest.mark.parametrize("fmt", sorted(TARGET_FORMATS))
def test_converts_to_each_format(sample_doc, fmt):
    result = runner.invoke(app, ["convert", str(sample_doc), "--format", fmt])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    output = sample_doc.with_suffix(TARGET_FORMATS[fmt].extension)
    assert output.exists()
    assert output.stat().st_size > 0


def test_reused_instance_over_directory(sample_doc):
    for name in ("two.doc", "three.doc"):
        (sample_doc.parent / name).write_text(SAMPLE_RTF)

    result = runner.invoke(
        app, ["convert", str(sample_doc.parent), "-f", "pdf", "--reuse-instance"]
    )

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert len(list(sample_doc.parent.glob("*.pdf"))) == 3
