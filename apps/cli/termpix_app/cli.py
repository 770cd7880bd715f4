"""CLI entrypoints for rendering images and managing termpix defaults."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

from termpix_core import AppConfig, TermpixError, load_config, load_pixel_buffer, save_config
from termpix_core.config import COLOR_MODES, RESIZE_FILTERS, VERTICAL_ALIGNMENTS
from termpix_core.logging_setup import configure_logging, get_logger
from termpix_render import ColorMode, HalfBlockRenderer, VerticalAlignment


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, sort_keys=True, default=str))


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {parsed}")
    return parsed


def _write_output(text: str, output: str | None) -> None:
    if output:
        path = Path(output).expanduser()
        path.write_text(text, encoding="utf-8")
        get_logger().info(f"wrote {len(text)} chars to {path}", extra={"event": "output_written", "output": str(path)})
    else:
        sys.stdout.write(text)
        sys.stdout.flush()


def cmd_render(args: argparse.Namespace, cfg: AppConfig) -> int:
    color_mode = ColorMode(args.color_mode or cfg.render.color_mode)
    alignment = VerticalAlignment(args.vertical_alignment or cfg.render.vertical_alignment)
    width = args.resize_to_width if args.resize_to_width is not None else cfg.render.resize_to_width
    resize_filter = args.resize_filter or cfg.render.resize_filter

    buffer = load_pixel_buffer(Path(args.input_file), width=width, resize_filter=resize_filter)
    renderer = HalfBlockRenderer(alignment)

    if args.raw:
        # Raw output has no run-time dispatch, so auto means the richest tier.
        tier = color_mode.tier or ColorMode.TRUECOLOR.tier
        text = renderer.render(buffer, tier)
    else:
        text = renderer.script(buffer, color_mode)

    _write_output(text, args.output)
    return 0


def cmd_config_show(_args: argparse.Namespace, cfg: AppConfig) -> int:
    _print_json(asdict(cfg))
    return 0


def cmd_config_set(args: argparse.Namespace, cfg: AppConfig) -> int:
    if args.color_mode is not None:
        cfg.render.color_mode = args.color_mode
    if args.vertical_alignment is not None:
        cfg.render.vertical_alignment = args.vertical_alignment
    if args.resize_filter is not None:
        cfg.render.resize_filter = args.resize_filter
    if args.resize_to_width is not None:
        cfg.render.resize_to_width = args.resize_to_width or None
    if args.keep_log_files is not None:
        cfg.diagnostics.keep_log_files = args.keep_log_files
    path = save_config(cfg)
    _print_json({"saved": str(path), "config": asdict(cfg)})
    return 0


def _add_render_options(cmd: argparse.ArgumentParser) -> None:
    cmd.add_argument("--color-mode", choices=COLOR_MODES, default=None, help="Color fidelity, or auto to decide in the shell")
    cmd.add_argument(
        "--vertical-alignment",
        choices=VERTICAL_ALIGNMENTS,
        default=None,
        help="Keep odd-height images flush to the top or the bottom of the last cell row",
    )
    cmd.add_argument("--resize-filter", choices=RESIZE_FILTERS, default=None)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="termpix", description="Render images as half-block terminal art")
    parser.add_argument("--verbose", action="store_true", help="Log per-variant render timings")
    sub = parser.add_subparsers(dest="command", required=True)

    render_cmd = sub.add_parser("render", help="Render an image to a shell snippet or raw ANSI text")
    render_cmd.add_argument("input_file", help="Image file to render")
    _add_render_options(render_cmd)
    render_cmd.add_argument("--resize-to-width", type=_positive_int, default=None, help="Scale to this many columns")
    render_cmd.add_argument("--raw", action="store_true", help="Write styled text directly instead of a shell snippet")
    render_cmd.add_argument("--output", "-o", default=None, help="Write to this file instead of stdout")
    render_cmd.set_defaults(func=cmd_render)

    config_cmd = sub.add_parser("config", help="Show or change saved defaults")
    config_sub = config_cmd.add_subparsers(dest="config_cmd", required=True)
    show_cmd = config_sub.add_parser("show", help="Print effective configuration")
    show_cmd.set_defaults(func=cmd_config_show)
    set_cmd = config_sub.add_parser("set", help="Persist render defaults")
    _add_render_options(set_cmd)
    set_cmd.add_argument("--resize-to-width", type=int, default=None, help="0 disables resizing")
    set_cmd.add_argument("--keep-log-files", type=_positive_int, default=None)
    set_cmd.set_defaults(func=cmd_config_set)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    cfg = load_config()
    logger = configure_logging(keep_files=cfg.diagnostics.keep_log_files, console=False, verbose=args.verbose)
    try:
        return int(args.func(args, cfg))
    except (TermpixError, ValueError) as exc:
        logger.error(str(exc), extra={"event": "command_failed"})
        print(f"termpix: error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
