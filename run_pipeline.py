"""
Command line menu for the 1D acceleration pipeline.
Usage:
  python run_pipeline.py set-variables
  python run_pipeline.py process --source log.xlsx
  python run_pipeline.py process --source log.csv --out processed.xlsx --plot-dir plots
  python run_pipeline.py demo --out demo.xlsx
"""

import argparse
import logging
import sys
from pathlib import Path

import config
from errors import (
    DataSheetNotFoundError,
    InvalidColumnReferenceError,
    InvalidRangeError,
    MissingConfigurationError,
    OutputSheetExistsError,
)

PIPELINE_ERRORS = (
    MissingConfigurationError,
    DataSheetNotFoundError,
    InvalidRangeError,
    InvalidColumnReferenceError,
    OutputSheetExistsError,
    FileNotFoundError,
)


def ask_stdin(title: str, text: str):
    """Prompt on the terminal. Returns None on end of input (cancel)."""
    label = f"{title} ({text})" if text else title
    try:
        return input(f"{label}: ")
    except EOFError:
        return None


def print_insights(result: dict) -> None:
    print(f"Processed {len(result['derived'])} readings. Shift value: {result['shift_value']:.4f} m/s²")
    for label, value in result["insights"].as_rows():
        print(f"  {label:<28}{value:.4f}")


def cmd_set_variables(args) -> int:
    from settings import prompt_settings, save_settings

    settings = prompt_settings(ask_stdin)
    path = save_settings(settings, args.settings)
    print(f"Variables set ({path})")
    return 0


def cmd_process(args) -> int:
    from settings import load_settings
    from pipeline import run_pipeline

    settings = load_settings(args.settings)
    result = run_pipeline(
        settings,
        args.source,
        output_path=args.out,
        make_figures=args.plot_dir is not None,
    )
    print_insights(result)
    print(f"Saved sheet '{config.OUTPUT_SHEET_NAME}' to {result['output_path']}")
    if args.plot_dir is not None:
        save_figures(result["figures"], args.plot_dir)
    return 0


def cmd_demo(args) -> int:
    """Process a synthetic log with columns A-E and rest rows 2-11."""
    from pipeline import run_pipeline
    from synthetic_data import demo_settings, write_synthetic_log

    source = Path(args.out).with_name(Path(args.out).stem + "-log.csv")
    print("Generating synthetic accelerometer log (10 s, one push)...")
    write_synthetic_log(str(source), seed=42)
    result = run_pipeline(demo_settings(), str(source), output_path=args.out, make_figures=args.plot_dir is not None)
    print_insights(result)
    print(f"Saved sheet '{config.OUTPUT_SHEET_NAME}' to {result['output_path']}")
    if args.plot_dir is not None:
        save_figures(result["figures"], args.plot_dir)
    return 0


def save_figures(figures, plot_dir: str) -> None:
    plot_dir = Path(plot_dir)
    plot_dir.mkdir(parents=True, exist_ok=True)
    for i, fig in enumerate(figures):
        out = plot_dir / f"motion_fig_{i+1}.png"
        fig.savefig(out, dpi=120)
        print(f"Saved {out}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="1D acceleration processing: velocity, displacement and charts")
    parser.add_argument("--settings", type=str, default=config.DEFAULT_SETTINGS_FILE, help="Variables file (JSON)")
    parser.add_argument("--verbose", action="store_true", help="Log each pipeline step")
    sub = parser.add_subparsers(dest="command", required=True)

    p_set = sub.add_parser("set-variables", help="Enter sheet name, column letters and baseline rows")
    p_set.set_defaults(func=cmd_set_variables)

    p_proc = sub.add_parser("process", help="Process the logged acceleration data")
    p_proc.add_argument("--source", type=str, required=True, help="Workbook (.xlsx) or CSV with the logged data")
    p_proc.add_argument("--out", type=str, default=None, help="Workbook to add the processed sheet to (default: the source workbook)")
    p_proc.add_argument("--plot-dir", type=str, default=None, help="Also save the charts as PNG files here")
    p_proc.set_defaults(func=cmd_process)

    p_demo = sub.add_parser("demo", help="Process a synthetic log")
    p_demo.add_argument("--out", type=str, default="demo-processed.xlsx", help="Output workbook")
    p_demo.add_argument("--plot-dir", type=str, default=None, help="Also save the charts as PNG files here")
    p_demo.set_defaults(func=cmd_demo)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(name)s - %(levelname)s - %(message)s",
    )
    try:
        return args.func(args)
    except PIPELINE_ERRORS as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
