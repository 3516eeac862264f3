import argparse
import json
import logging
import sys

from . import __version__
from .api import detail, search
from .models import VideoDetail


def format_brief(envelope: dict) -> str:
    """One line per search result, or a one-line detail summary."""
    if envelope.get("code") != 200:
        return f"❌ [{envelope.get('code')}] {envelope.get('msg', '')}"
    if "results" in envelope:
        lines = []
        for i, item in enumerate(envelope["results"], 1):
            extra = " | ".join(v for v in (item.get("duration"), item.get("views"), item.get("rating")) if v)
            lines.append(f"{i:>2}. {item['title'] or '(untitled)'}" + (f"  [{extra}]" if extra else ""))
            if item.get("url"):
                lines.append(f"    {item['url']}")
        return "\n".join(lines)
    record = VideoDetail(
        title=envelope.get("title", ""),
        uploader=envelope.get("uploader", ""),
        video_sources=envelope.get("videoSources") or {},
    )
    best = record.best_source()
    line = f"{record.title or '(untitled)'} by {record.uploader or '?'} - {record.best_quality_label()}"
    return line + (f"\n    {best[1]}" if best else "")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="javkit",
        description=f"javkit v{__version__} - video catalog search and detail scraper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  javkit search "keyword"
  javkit detail "https://www.javbangers.com/videos/12345/slug/" --brief
""",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_search = sub.add_parser("search", help="search the catalog (first page)")
    p_search.add_argument("keyword")
    p_detail = sub.add_parser("detail", help="scrape a video page")
    p_detail.add_argument("url")
    for p in (p_search, p_detail):
        fmt = p.add_mutually_exclusive_group()
        fmt.add_argument("--json", "-j", action="store_true", help="JSON envelope output (default)")
        fmt.add_argument("--brief", "-b", action="store_true", help="compact text output")

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
    if args.verbose:
        logging.getLogger("javkit").setLevel(logging.DEBUG)

    if args.command == "search":
        envelope = search(args.keyword)
    else:
        envelope = detail(args.url)

    if args.brief:
        print(format_brief(envelope))
    else:
        print(json.dumps(envelope, ensure_ascii=False, indent=2))
    return 0 if envelope["code"] == 200 else 1


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
