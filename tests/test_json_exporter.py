import json

from validador_ec.adapters.json_exporter import build_report, export_outcomes_json


def test_build_report_counts(validator):
    outcomes = [validator.check(n) for n in ("0926687856", "0926687858", "1760001550001")]
    report = build_report(outcomes)

    assert report["total"] == 3
    assert report["valid"] == 2
    assert report["invalid"] == 1
    assert report["outcomes"][1]["error"] == "Check digit validation failed"


def test_export_writes_stable_utf8_json(validator, tmp_path):
    output = tmp_path / "reports" / "lote.json"
    outcomes = [validator.check("0992397535001"), validator.check("abc")]

    written = export_outcomes_json(outcomes=outcomes, output_path=output)

    assert written == output
    text = output.read_text(encoding="utf-8")
    assert text.endswith("\n")
    data = json.loads(text)
    assert data["outcomes"][0]["number"] == "0992397535001"
    assert data["outcomes"][0]["document_type"] == "ruc_private"
    assert data["outcomes"][1]["error_kind"] == "non_digit"
    assert list(data) == sorted(data)
