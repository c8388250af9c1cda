#!/usr/bin/env python3
import argparse
import json
import sys
import requests

API = "http://127.0.0.1:8000/api/analyze"

def main():
    ap = argparse.ArgumentParser(description="Smoke-test a running companion server")
    ap.add_argument("text", nargs="?", default="I feel stressed about my new job")
    ap.add_argument("--lang", default="", help='target language ("en", "fr", "es", "ar"; empty = auto)')
    ap.add_argument("--legacy", action="store_true", help="send the text as 'dilemma'")
    ap.add_argument("--url", default=API)
    args = ap.parse_args()

    payload = {"dilemma" if args.legacy else "text": args.text, "lang": args.lang}

    print(f"POST {args.url} with payload:")
    print(json.dumps(payload, indent=2, ensure_ascii=False))

    try:
        r = requests.post(args.url, json=payload, timeout=60)
    except requests.RequestException as e:
        print(f"❌ HTTP error: {e}")
        sys.exit(1)

    try:
        data = r.json()
    except ValueError:
        print("❌ Could not parse JSON:\n", r.text)
        sys.exit(1)

    if not data.get("ok"):
        print(f"\n❌ {r.status_code}: {data.get('error')}")
        sys.exit(1)

    print("\n=== Analysis ===")
    print(f"Theme: {data.get('theme')}  Lang: {data.get('lang')}")
    print(f"Tone: {data.get('tone')}  Structure: {data.get('structure')}  Card: {data.get('card') or '-'}")
    print(f"Practice: {data.get('practice')}")
    print(f"\n{data.get('text', '').strip() or '<empty>'}")

if __name__ == "__main__":
    main()
