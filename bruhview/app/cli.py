from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from ..conversion import compile_image, describe_container, open_bruh
from ..settings import RenderSettings
from .diagnostics import emit_startup_warnings

COMMANDS = ("compile", "view", "info")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bruhview",
        description="Convert images to the BRUH run-length format and preview BRUH files.",
    )
    parser.add_argument("command", help="'compile', 'view', 'info', or a .bruh file to preview")
    parser.add_argument("paths", nargs="*", help="Image files for 'compile', or a .bruh file")
    parser.add_argument("--output", metavar="PATH", help="Destination for 'compile' (single input only)")
    parser.add_argument("--no-window", action="store_true", help="Decode and report size without opening a window")
    parser.add_argument("--export", metavar="PNG", help="Also write the rendered PNG to this path")
    parser.add_argument("--workers", type=int, help="Rasterizer worker threads (default: BRUH_WORKERS or auto)")
    parser.epilog = "With a single .bruh path and no command, the file is previewed."
    return parser


def compile_paths(paths: List[str], output: Optional[str]) -> int:
    failed = False
    for path in paths:
        try:
            destination = compile_image(path, output)
        except Exception as exc:
            print(f"Failed to convert {path} to BRUH: {exc}", file=sys.stderr)
            failed = True
            continue
        print(f"Successfully converted {path} to {destination}")
    return 1 if failed else 0


def show_info(path: str) -> int:
    summary = describe_container(path)
    print(f"{path}: {summary.width}x{summary.height}")
    print(f"runs: {summary.runs}")
    print(f"pixels: {summary.expanded_pixels} of {summary.width * summary.height}")
    print(f"size: {summary.file_size} bytes (raw RGB {summary.raw_size} bytes, ratio {summary.ratio:.2f})")
    return 0


def view_file(path: str, args: argparse.Namespace) -> int:
    settings = _resolve_render_settings(args)
    decoded = open_bruh(path, settings)
    print(f"{decoded.width} {decoded.height}")
    if args.export:
        with open(args.export, "wb") as handle:
            handle.write(decoded.png)
    if args.no_window:
        return 0
    from .viewer import show_image

    show_image(decoded)
    return 0


def _resolve_render_settings(args: argparse.Namespace) -> RenderSettings:
    if args.workers is None:
        return RenderSettings()
    if args.workers < 1:
        raise ValueError("--workers must be at least 1")
    return RenderSettings(workers=args.workers)


def _resolve_target(args: argparse.Namespace) -> Optional[str]:
    if args.command in COMMANDS:
        if len(args.paths) != 1:
            return None
        return args.paths[0]
    if args.paths:
        return None
    return args.command


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_usage(sys.stderr)
        return 2
    args = parser.parse_args(argv)
    if args.command == "compile":
        if not args.paths:
            print("Missing image path. Example: bruhview compile ~/image.png", file=sys.stderr)
            return 2
        if args.output and len(args.paths) > 1:
            print("--output can only be used with a single image path.", file=sys.stderr)
            return 2
        return compile_paths(args.paths, args.output)
    path = _resolve_target(args)
    if path is None:
        print("Provide exactly one .bruh file. Use --help for usage.", file=sys.stderr)
        return 2
    try:
        if args.command == "info":
            return show_info(path)
        emit_startup_warnings(needs_window=not args.no_window)
        return view_file(path, args)
    except Exception as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
