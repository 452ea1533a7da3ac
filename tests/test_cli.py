import json
import subprocess
import sys
from pathlib import Path

import pandas as pd
import pytest

from main import run


ROOT = Path(__file__).resolve().parents[1]

HTML_TEMPLATE = """
<html><body>
  <h2>{club}</h2>
  <span>10/05/2024</span>
  <table>
    <tr><td>1</td><td>{carry}</td><td>2500</td><td>1.48</td><td>11.2</td><td>165</td><td>112</td></tr>
  </table>
</body></html>
"""


def write_report(tmp_path: Path, club: str = "Driver", carry: float = 250) -> Path:
    html_path = tmp_path / "report.html"
    html_path.write_text(HTML_TEMPLATE.format(club=club, carry=carry))
    return html_path


def test_run_function_writes_expected_json(tmp_path):
    html_path = write_report(tmp_path)
    output_path = tmp_path / "out.json"

    payload = run(html_path=html_path, output_path=output_path)

    assert output_path.exists()
    written = json.loads(output_path.read_text())
    assert written == payload
    assert payload["club"] == "Driver"
    assert payload["date"] == "10/05/2024"
    assert len(payload["shots"]) == 1
    assert payload["shots"][0]["carry"] == 250.0
    assert payload["stats"]["shotCount"] == 1


def test_run_function_writes_excel(tmp_path):
    html_path = write_report(tmp_path, club="PW", carry=120)
    excel_path = tmp_path / "shots.xlsx"

    run(html_path=html_path, output_path=tmp_path / "out.json", excel_path=excel_path)

    shots = pd.read_excel(excel_path, sheet_name="shots")
    summary = pd.read_excel(excel_path, sheet_name="summary")
    assert list(shots["carry"]) == [120]
    assert summary.loc[0, "club"] == "PW"
    assert summary.loc[0, "shotCount"] == 1


def test_run_requires_exactly_one_source(tmp_path):
    with pytest.raises(ValueError):
        run(output_path=tmp_path / "out.json")


def test_cli_exit_on_invalid_url(tmp_path):
    output_path = tmp_path / "out.json"

    process = subprocess.run(
        [sys.executable, "main.py", "--url", "https://example.com/report", "--output", str(output_path)],
        capture_output=True,
        text=True,
        cwd=ROOT,
    )

    assert process.returncode != 0
    assert "Invalid TrackMan URL" in process.stderr
    assert not output_path.exists()
