"""
CLI to generate poems for a batch of phrases across one or more corpora.

Reads poems/poems.yml (or a given config), builds one GraphPoet per corpus
using the configured graph representation, and writes one row per
(corpus, phrase) to CSV.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence
import argparse
import csv
import time

import yaml

from graph import available_graphs
from poet import GraphPoet


RESULT_FIELDS = [
    "corpus",
    "graph",
    "phrase",
    "poem",
    "bridges",
    "vertices",
    "duration_sec",
    "error",
]


@dataclass(frozen=True)
class CorpusConfig:
    name: str
    path: Path


@dataclass(frozen=True)
class Config:
    graph: str
    corpora: Sequence[CorpusConfig]
    phrases: Sequence[str]


def load_config(path: Path) -> Config:
    """
    Parse a YAML poem config.

    Corpus paths are resolved relative to the config file.
    """
    data = yaml.safe_load(Path(path).read_text()) or {}

    kind = str(data.get("graph", "vertices"))
    if kind not in available_graphs():
        raise ValueError(f"Unknown graph kind '{kind}', expected one of {available_graphs()}.")

    base = Path(path).parent
    corpora = [
        CorpusConfig(name=str(c["name"]), path=base / str(c["path"]))
        for c in data["corpora"]
    ]
    phrases = [str(p) for p in data["phrases"]]
    return Config(graph=kind, corpora=corpora, phrases=phrases)


def run_poems(config_path: Path, results_csv: Optional[Path] = None) -> List[Dict[str, object]]:
    cfg = load_config(config_path)
    start = time.time()

    results: List[Dict[str, object]] = []
    for corpus in cfg.corpora:
        try:
            poet = GraphPoet.from_file(corpus.path, kind=cfg.graph)
        except OSError as exc:
            print(f"[poem] failed to read corpus={corpus.name} path={corpus.path}: {exc}")
            results.append(_error_row(corpus, cfg.graph, str(exc)))
            continue

        print(f"[poem] corpus={corpus.name} graph={cfg.graph} vertices={len(poet.vertices())}")
        for phrase in cfg.phrases:
            results.append(_run_phrase(poet, corpus, cfg.graph, phrase))

    if results_csv:
        write_results_csv(results, results_csv)

    elapsed = time.time() - start
    print(f"[poem] completed {len(results)} poems in {elapsed:.2f}s")
    return results


def _run_phrase(poet: GraphPoet, corpus: CorpusConfig, kind: str, phrase: str) -> Dict[str, object]:
    start_run = time.time()
    text, found = poet.compose(phrase)
    bridges = [b for b in found if b is not None]
    return {
        "corpus": corpus.name,
        "graph": kind,
        "phrase": phrase,
        "poem": text,
        "bridges": len(bridges),
        "vertices": len(poet.vertices()),
        "duration_sec": time.time() - start_run,
        "error": "",
    }


def _error_row(corpus: CorpusConfig, kind: str, error: str) -> Dict[str, object]:
    return {
        "corpus": corpus.name,
        "graph": kind,
        "phrase": "",
        "poem": "",
        "bridges": 0,
        "vertices": 0,
        "duration_sec": 0.0,
        "error": error,
    }


def write_results_csv(results: Iterable[Dict[str, object]], path: Path) -> None:
    """
    Write per-phrase results to CSV.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=RESULT_FIELDS)
        writer.writeheader()
        for res in results:
            writer.writerow({key: res.get(key, "") for key in RESULT_FIELDS})


def main(argv: Optional[Sequence[str]] = None) -> None:
    default_config = Path(__file__).parent / "poems" / "poems.yml"

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", nargs="?", type=Path, default=default_config)
    parser.add_argument("--out", type=Path, default=None, help="CSV file for per-phrase results")
    args = parser.parse_args(argv)

    results = run_poems(args.config, results_csv=args.out)
    for res in results:
        if res["error"]:
            continue
        print(f"{res['phrase']} -> {res['poem']}")
    if args.out:
        print(f"Wrote results to {args.out}")


if __name__ == "__main__":
    main()
