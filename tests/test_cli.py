import json

from typer.testing import CliRunner

from linkedin_lens.cli import app

runner = CliRunner()

CHANGELOG = {"elements": [
    {"resourceName": "ugcPosts", "method": "CREATE", "resourceId": "p1", "capturedAt": 0,
     "activity": {"specificContent": {"com.linkedin.ugc.ShareContent": {"shareCommentary": {"text": "#hello"}}}}},
    {"resourceName": "socialActions/likes", "method": "CREATE", "capturedAt": 0, "activity": {"object": "p1"}},
]}


def test_report_writes_json(tmp_path):
    changelog = tmp_path / "changelog.json"
    changelog.write_text(json.dumps(CHANGELOG))
    out = tmp_path / "report.json"

    result = runner.invoke(app, ["report", "--changelog", str(changelog), "--range", "7d", "--output", str(out)])

    assert result.exit_code == 0, result.output
    report = json.loads(out.read_text())
    assert report["timeRange"] == "7d"
    assert report["engagementPerPost"][0]["likes"] == 1
    assert report["topHashtags"] == [{"hashtag": "#hello", "count": 1}]


def test_report_prints_tables_without_inputs():
    result = runner.invoke(app, ["report"])
    assert result.exit_code == 0, result.output
    assert "New connections in range" in result.output


def test_report_rejects_unknown_range():
    result = runner.invoke(app, ["report", "--range", "1y"])
    assert result.exit_code == 1
