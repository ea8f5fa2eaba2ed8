#!/usr/bin/env python3
"""Command-line interface for speedread.

This is the main entry point for the speedread command-line tool.
"""
from __future__ import annotations

import argparse
import sys
import termios
import traceback
from typing import List, Optional

from .bookmarks import BookmarkStore, prompt_resume, should_bookmark
from .compositor import TerminalCompositor
from .config import (
    SCALE_REFS,
    apply_overrides,
    clamp_wpm,
    color_to_ansi,
    load_config_file,
    resolve_scale_reference,
    validate_config,
)
from .input_listener import InputListener
from .logging_utils import die, log
from .models import TOOL_VERSION, ResolvedConfig, Word
from .playback import INTERRUPTED, PlaybackController, PlaybackResult, PlaybackState
from .rendering import WordRenderer
from .sources import SourceError, read_input
from .stats import SessionStats, format_summary
from .terminal import RawTerminal
from .text_processing import EmptyInputError, tokenize


# ============================================================
# Argument Parsing
# ============================================================

BOOL_FLAGS = ("focal", "context")

_TRUE = {"1", "t", "true", "yes", "on"}
_FALSE = {"0", "f", "false", "no", "off"}


def normalize_bool_flags(argv: List[str]) -> List[str]:
    """Rewrite "-focal=false" style arguments into -focal / -no-focal.

    Args:
        argv: Raw arguments (without the program name)

    Returns:
        Arguments argparse can consume

    Raises:
        ValueError: If a boolean flag has a value that is not a boolean
    """
    out: List[str] = []
    for arg in argv:
        name, sep, value = arg.lstrip("-").partition("=")
        if arg.startswith("-") and sep and name in BOOL_FLAGS:
            v = value.strip().lower()
            if v in _TRUE:
                out.append(f"-{name}")
            elif v in _FALSE:
                out.append(f"-no-{name}")
            else:
                raise ValueError(f"invalid boolean value {value!r} for -{name}")
            continue
        out.append(arg)
    return out


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="speedread",
        description="Terminal RSVP speed reader: one big word at a time.",
        allow_abbrev=False,
    )
    ap.add_argument("source", nargs="?", default=None, help="Text file or http(s) URL. Reads stdin if omitted.")

    ap.add_argument("-wpm", "--wpm", type=int, default=None, help="Words per minute (10-1000, default 200)")
    ap.add_argument(
        "-punct-pause", "--punct-pause", "-p",
        dest="punct_pause", type=int, default=None,
        help="Extra pause after punctuation in milliseconds (default 0)",
    )
    ap.add_argument("-focal", "--focal", dest="focal", action="store_const", const=True, default=None,
                    help="Enable focal point (ORP) highlighting (default)")
    ap.add_argument("-no-focal", "--no-focal", dest="focal", action="store_const", const=False,
                    help="Disable focal point highlighting")
    ap.add_argument(
        "-focal-color", "--focal-color", "-c",
        dest="focal_color", default=None,
        help="Focal point color (black, red, green, yellow, blue, magenta, cyan, white)",
    )
    ap.add_argument("-context", "--context", dest="context", action="store_const", const=True, default=None,
                    help="Show surrounding words (prev/next) for context")
    ap.add_argument("-no-context", "--no-context", dest="context", action="store_const", const=False,
                    help=argparse.SUPPRESS)
    ap.add_argument("-scale-ref", "--scale-ref", dest="scale_ref", choices=SCALE_REFS, default=None,
                    help="Uniform size reference: longest word in the document, or a fixed 8 characters")

    ap.add_argument("-config", "--config", default=None, help="JSON config file. CLI args override config.")
    ap.add_argument("-no-resume", "--no-resume", dest="no_resume", action="store_true",
                    help="Ignore saved bookmarks (start from the beginning)")
    ap.add_argument("-debug", "--debug", action="store_true")
    ap.add_argument("-version", "--version", action="store_true")
    return ap


def resolve_config(args: argparse.Namespace) -> ResolvedConfig:
    """Build config: defaults -> config file -> CLI overrides.

    Raises:
        FileNotFoundError: If the config file is missing
        ValueError: If the config file or a value is invalid
    """
    cfg = apply_overrides(ResolvedConfig(), load_config_file(args.config))

    if args.wpm is not None:
        cfg.wpm = clamp_wpm(args.wpm)
    if args.punct_pause is not None:
        cfg.punct_pause_ms = args.punct_pause
    if args.focal is not None:
        cfg.focal = args.focal
    if args.focal_color is not None:
        cfg.focal_color = args.focal_color
    if args.context is not None:
        cfg.context = args.context
    if args.scale_ref is not None:
        cfg.scale_ref = args.scale_ref

    return validate_config(cfg)


# ============================================================
# Session
# ============================================================

def run_session(
    words: List[Word],
    cfg: ResolvedConfig,
    terminal: RawTerminal,
    compositor: TerminalCompositor,
    start_index: int = 0,
) -> PlaybackResult:
    """Run playback with the key listener attached to the terminal.

    Args:
        words: Tokenized document
        cfg: Resolved configuration
        terminal: Open raw-mode terminal
        compositor: Screen writer
        start_index: Initial word index

    Returns:
        Playback result (completed or interrupted)
    """
    state = PlaybackState(len(words), start_index=start_index, wpm=cfg.wpm)
    controller = PlaybackController(
        words,
        state,
        compositor,
        SessionStats(),
        punct_pause_ms=cfg.punct_pause_ms,
    )
    listener = InputListener(terminal.fd, state, on_interrupt=controller.stop)
    listener.start()
    try:
        return controller.run()
    finally:
        listener.stop()


# ============================================================
# CLI
# ============================================================

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the speedread command-line tool.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    ap = build_parser()
    try:
        raw = normalize_bool_flags(list(sys.argv[1:] if argv is None else argv))
    except ValueError as e:
        ap.error(str(e))
    args = ap.parse_args(raw)

    if args.version:
        print(TOOL_VERSION)
        return 0

    try:
        cfg = resolve_config(args)
    except (OSError, ValueError) as e:
        return die(str(e), 2)

    try:
        text = read_input(args.source)
        words = tokenize(text)
    except (SourceError, EmptyInputError) as e:
        return die(str(e))
    except KeyboardInterrupt:
        return die("Interrupted by user.", 130)
    log(f"Read {len(words)} words from {args.source or 'stdin'}", quiet=not args.debug)

    store = BookmarkStore()
    bookmarked = should_bookmark(args.source)
    start_index = 0
    if bookmarked and not args.no_resume:
        saved = store.get(args.source)
        if 0 < saved < len(words):
            try:
                if prompt_resume(saved, len(words)):
                    start_index = saved
            except KeyboardInterrupt:
                return die("Interrupted by user.", 130)

    renderer = WordRenderer(
        focal=cfg.focal,
        focal_color_code=color_to_ansi(cfg.focal_color),
        reference_len=resolve_scale_reference(cfg, words),
    )
    compositor = TerminalCompositor(renderer, context=cfg.context)
    log(
        f"wpm={cfg.wpm} punct_pause={cfg.punct_pause_ms}ms scale_ref={cfg.scale_ref} "
        f"(reference {renderer.reference_len} chars) start={start_index}",
        quiet=not args.debug,
    )

    terminal = RawTerminal()
    try:
        terminal.open()
    except (OSError, termios.error) as e:
        return die(f"failed to set up terminal: {e}")

    try:
        try:
            result = run_session(words, cfg, terminal, compositor, start_index)
            if bookmarked:
                # index 0 removes the bookmark
                store.save(args.source, result.index if result.reason == INTERRUPTED else 0)
        finally:
            terminal.close()
    except Exception as e:
        if args.debug:
            traceback.print_exc()
        return die(str(e))

    compositor.clear()
    if result.reason == INTERRUPTED:
        compositor.write_lines(["Interrupted. Position saved." if bookmarked else "Interrupted."])
    else:
        compositor.write_lines(format_summary(result.summary))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
