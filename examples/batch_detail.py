#!/usr/bin/env python3
"""
Batch example - read video page URLs from a file and scrape each one.

Usage:
    python examples/batch_detail.py links.txt
    python examples/batch_detail.py links.txt --output results/
"""
import argparse
import json
import os
import sys

from javkit import detail


def main():
    parser = argparse.ArgumentParser(description="Scrape detail pages in batch")
    parser.add_argument("file", help="links file (one URL per line, # for comments)")
    parser.add_argument("--output", "-o", help="directory for one JSON file per page")
    args = parser.parse_args()

    with open(args.file) as f:
        urls = [line.strip() for line in f if line.strip() and not line.startswith("#")]

    if args.output:
        os.makedirs(args.output, exist_ok=True)

    print(f"📋 {len(urls)} links\n", file=sys.stderr)

    ok = 0
    for i, url in enumerate(urls, 1):
        print(f"[{i}/{len(urls)}] {url[:60]}...", file=sys.stderr)
        envelope = detail(url)
        if envelope["code"] != 200:
            print(f"  ❌ {envelope['msg']}", file=sys.stderr)
            continue
        ok += 1
        if args.output:
            with open(os.path.join(args.output, f"{i:04d}.json"), "w", encoding="utf-8") as f:
                json.dump(envelope, f, ensure_ascii=False, indent=2)
        else:
            print(json.dumps(envelope, ensure_ascii=False))

    print(f"\n✅ done: {ok}/{len(urls)} succeeded", file=sys.stderr)


if __name__ == "__main__":
    main()
