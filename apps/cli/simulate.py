# apps/cli/simulate.py
"""
Run guessing modes against a truthful oracle answerer.

For every secret in the (sampled) dictionary, each mode plays one full round
where answers come from the secret itself. Useful to compare modes and to
check that nothing hangs or misbehaves on a real word list.

Writes per-mode outputs to: <outdir>/<mode_id>/run_<timestamp>.csv + _manifest.json
"""

from __future__ import annotations
import argparse, sys, time, random
from pathlib import Path
from typing import Dict, List, Tuple

# Optional progress bar
try:
    from tqdm import tqdm  # pip install tqdm

    _HAS_TQDM = True
except Exception:
    _HAS_TQDM = False

from packages.datasets import validate_dictionary, pretty_summary, load_corpus, DEFAULT_DICTIONARY
from packages.engine.errors import CorpusLoadError
from packages.session import MODES, OracleChannel, get_mode, run_round
from packages.session.io import (write_csv, write_manifest, summarize, timestamp_id,
                                 git_commit_or_unknown)


def _progress_mode(mode: str) -> str:
    if mode == "auto":
        return "bar" if (_HAS_TQDM and sys.stderr.isatty()) else "plain"
    if mode == "bar" and not _HAS_TQDM:
        return "plain"
    return mode


def _run_one_mode(mode_id: str, cases: List[str], *, corpus: List[str], base_seed: int,
                  outdir: Path, progress: str, dictionary: Dict) -> Tuple[str, str, Dict]:
    mode = get_mode(mode_id)
    results = []
    total = len(cases)
    pmode = _progress_mode(progress)
    iterator = tqdm(cases, ncols=80, desc=f"{mode_id}", unit="round") if pmode == "bar" else cases
    start = time.time()
    last_print = 0.0

    for idx, secret in enumerate(iterator, 1):
        r = run_round(mode_id, secret, corpus, channel=OracleChannel(secret),
                      seed=base_seed + idx)
        results.append(r)

        if pmode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{mode_id}] {idx}/{total} {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s")
                sys.stderr.flush()
                last_print = now
    if pmode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    # write outputs under <outdir>/<mode_id>/
    run_id = timestamp_id()
    mdir = outdir / mode_id
    mdir.mkdir(parents=True, exist_ok=True)
    csv_path = mdir / f"run_{run_id}.csv"
    manifest_path = mdir / f"run_{run_id}_manifest.json"

    # a round can never ask more questions than its budget
    write_csv(results, str(csv_path), max_questions=mode.budget)
    summary = summarize(results)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": {"mode": mode_id, "policy": mode.policy, "budget": mode.budget,
                   "penalty": mode.penalty, "seed": base_seed, "num_cases": len(cases)},
        "dictionary": dictionary,
        "summary": summary,
    }
    write_manifest(manifest, str(manifest_path))
    return str(csv_path), str(manifest_path), summary


def main(argv=None) -> int:
    registered = sorted(MODES)
    ap = argparse.ArgumentParser(description="Knowsall — simulate guessing modes")
    ap.add_argument("--modes", nargs="+", default=["ALL"],
                    help=f"list of mode ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--exclude", nargs="*", default=[],
                    help="mode ids to skip (only if --modes ALL)")
    ap.add_argument("--dictionary", default=DEFAULT_DICTIONARY)
    ap.add_argument("--length", type=int, help="only use secrets of this length")
    ap.add_argument("--sample", type=int, help="play only this many secrets (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto")
    args = ap.parse_args(argv)

    # 1) validate + load once
    rep = validate_dictionary(args.dictionary, N=None)
    print(pretty_summary(rep))
    try:
        corpus = load_corpus(args.dictionary)
    except CorpusLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # 2) shared cases (deterministic by seed); secrets must be alphabetic
    pool = [w for w in dict.fromkeys(corpus) if w.isalpha()]
    if args.length is not None:
        pool = [w for w in pool if len(w) == args.length]
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(pool):
        rng.shuffle(pool)
        cases = pool[:args.sample]
    else:
        cases = pool

    # 3) expand modes
    if len(args.modes) == 1 and args.modes[0].lower() == "all":
        todo = [m for m in registered if m not in set(args.exclude)]
    else:
        todo = args.modes
        missing = [m for m in todo if m not in MODES]
        if missing:
            raise SystemExit(f"Unknown mode ids: {missing}. Registered: {registered}")

    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    # 4) run each mode sequentially (shared cases) with progress
    for mid in todo:
        if args.progress != "off":
            print(f"\n=== Running {mid} on {len(cases)} secrets ===")
        csv_path, manifest_path, summary = _run_one_mode(
            mid, cases, corpus=corpus, base_seed=args.seed, outdir=outdir,
            progress=args.progress, dictionary=rep,
        )
        print(f"{mid}: solved {summary['solve_rate']:.1%} of {summary['rounds']} "
              f"(mean questions {summary['mean_questions']}) | {summary['outcomes']}")
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
