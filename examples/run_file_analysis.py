"""
Tiny helper script to analyse a text file and save its log beside it.
Pass the file to analyse as the only argument.
"""

from __future__ import annotations

import sys

from textualyser import AnalysisOptions, FileAnalyser, TextualyserConfig


def main() -> None:
    if len(sys.argv) != 2:
        raise SystemExit("usage: run_file_analysis.py <text file>")

    analyser = FileAnalyser(TextualyserConfig(parallel_passes=True))
    options = AnalysisOptions.from_flags([True, True, True], pattern="the")
    analyser.process(sys.argv[1], options)

    print(analyser.render())
    print("-" * 40)
    print(f"Log written to {analyser.save_log()}")


if __name__ == "__main__":
    main()
