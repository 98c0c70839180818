#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
テキスト / JSON / JSONL → 振り返り解析結果（JSONL を stdout へ）
Usage:
  python tools/analyze_text.py --text "I always mess this up."
  python tools/analyze_text.py --input data/raw/journal.txt
  python tools/analyze_text.py --input data/raw/entries.jsonl --communication
"""
import json, argparse, sys

from reflection_engine import analyze, analyze_communication_style, check_grammar

def load_texts(path: str):
    """Plain text → 1 件。JSON 配列 / JSONL の場合は各レコードの "text" を使う。"""
    with open(path, "r", encoding="utf-8") as f:
        raw = f.read()
    stripped = raw.lstrip()
    if stripped.startswith("["):
        arr = json.loads(stripped)
        for i, e in enumerate(arr, start=1):
            yield i, (e.get("text") if isinstance(e, dict) else None)
        return
    if stripped.startswith("{"):
        for i, line in enumerate(raw.splitlines(), start=1):
            line = line.strip()
            if not line:
                continue
            try:
                e = json.loads(line)
            except ValueError:
                print(f"[skip] line {i}: not valid JSON", file=sys.stderr)
                continue
            yield i, (e.get("text") if isinstance(e, dict) else None)
        return
    yield 1, raw

def build_record(text: str, with_communication: bool) -> dict:
    out = {"text": text, "analysis": analyze(text).to_dict()}
    if with_communication:
        out["communication"] = {
            "analysis": list(analyze_communication_style(text)),
            "grammar": list(check_grammar(text)),
        }
    return out

def main(argv=None):
    ap = argparse.ArgumentParser(description="Analyze reflection text with the rule-based engine.")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--text")
    src.add_argument("--input")
    ap.add_argument("--communication", action="store_true", help="include speaking-style report")
    args = ap.parse_args(argv)

    items = [(1, args.text)] if args.text is not None else load_texts(args.input)
    written = 0
    for idx, text in items:
        if not isinstance(text, str) or not text.strip():
            print(f"[skip] item {idx}: empty or missing text", file=sys.stderr)
            continue
        rec = build_record(text.strip(), args.communication)
        print(json.dumps(rec, ensure_ascii=False))
        written += 1
    print(f"[done] analyzed={written}", file=sys.stderr)
    return 0

if __name__ == "__main__":
    sys.exit(main())
