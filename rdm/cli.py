from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rdm.config import load_settings
from rdm.i18n import LANG_CODES
from rdm.metrics import error_table
from rdm.periods import PERIODS, slice_period
from rdm.synthetic import generate


def main(argv: list[str] | None = None) -> None:
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Generate a synthetic rainfall series and export it as CSV.")
    parser.add_argument("--days", type=int, default=settings.days, help="Number of days to generate (RDM_DAYS)")
    parser.add_argument("--seed", type=int, default=settings.seed, help="Random seed (RDM_SEED); omit for fresh randomness")
    parser.add_argument("--lang", default=settings.lang, choices=LANG_CODES, help="Language of the date labels")
    parser.add_argument("--period", default=None, choices=[*PERIODS, "all"], help="Export only this season window")
    parser.add_argument("--out", type=Path, default=None, help="Destination CSV path; prints a summary when omitted")
    parser.add_argument("--log-level", default=settings.log_level, choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], help="Logging verbosity")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level.upper()))
    log = logging.getLogger(__name__)

    series = generate(args.days, rng=args.seed, lang=args.lang)
    if args.period is not None:
        series = slice_period(series, args.period)
    df = series.to_frame()

    if args.out is None:
        print(f"Generated {len(df)} days (seed={args.seed}).")
        if len(df):
            print(df.describe().loc[["mean", "max"]].round(2).to_string())
            print(error_table(series).round(3).to_string())
        return

    args.out.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.out, index=False)
    log.info("Wrote %d rows to %s", len(df), args.out)
    print(f"Series written to {args.out} ({len(df)} rows).")


if __name__ == "__main__":  # pragma: no cover
    main()
