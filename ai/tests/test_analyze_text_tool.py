import json

import analyze_text


def test_cli_text(capsys):
    assert analyze_text.main(["--text", "I always mess this up."]) == 0
    out = capsys.readouterr().out.strip().splitlines()
    rec = json.loads(out[0])
    assert rec["analysis"]["summary"] == "I always mess this up."
    assert "communication" not in rec


def test_cli_jsonl_input_skips_bad_lines(tmp_path, capsys):
    src = tmp_path / "entries.jsonl"
    src.write_text(
        '{"text": "The cat sat on the mat."}\nnot json\n{"text": "   "}\n{"text": "i think so"}\n',
        encoding="utf-8",
    )
    assert analyze_text.main(["--input", str(src), "--communication"]) == 0
    captured = capsys.readouterr()
    records = [json.loads(line) for line in captured.out.strip().splitlines()]
    assert [r["text"] for r in records] == ["The cat sat on the mat.", "i think so"]
    assert records[1]["communication"]["analysis"][0] == "Word count: 3"
    assert "[skip] line 2" in captured.err


def test_cli_plain_text_file(tmp_path, capsys):
    src = tmp_path / "journal.txt"
    src.write_text("Quiet day. Nothing much happened.\n", encoding="utf-8")
    analyze_text.main(["--input", str(src)])
    rec = json.loads(capsys.readouterr().out.strip())
    assert rec["analysis"]["summary"] == "Quiet day."
