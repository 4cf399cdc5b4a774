"""
cli.py - command line driver for the character-level Markov generator
Features:
- Trains a Generator on a corpus file and prints generated text
- Settings from a JSON config file, overridden by command line flags
- Optional diagnostic table of the trained windows and model stats
- Interactive mode: keep prompting for seed texts against one trained model
- Uses Rich for tables and formatting
"""

import argparse
import logging
from typing import List, Optional

# ui styling with Rich
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.prompt import Prompt
from rich.text import Text
from rich import box
from rich.markup import escape

from markov_textgen.core.generator import Generator
from markov_textgen.corpus.reader import read_corpus
from markov_textgen.errors import MarkovTextgenError
from markov_textgen.utils.config_manager import Config
from markov_textgen.utils.logger_utils import Log
from markov_textgen.utils.metrics_tracker import Metrics

logger = logging.getLogger(__name__)

# cap on rows rendered by the window table
TABLE_ROWS = 50


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="markov-textgen",
        description="Train a character-level Markov model on a corpus and generate text.",
    )
    parser.add_argument("corpus", help="path to the training corpus (text file)")
    parser.add_argument("-w", "--window", type=int, dest="window_length", help="window length (>= 1)")
    parser.add_argument("-s", "--seed", type=int, help="random seed for reproducible output")
    parser.add_argument("-n", "--length", type=int, help="number of characters to generate")
    parser.add_argument("--start", dest="initial_text", help="seed text to start from")
    parser.add_argument("--table", action="store_true", dest="show_table", help="show the window table")
    parser.add_argument("--stats", action="store_true", help="show model stats and timings")
    parser.add_argument("--config", help="JSON config file")
    parser.add_argument("--metrics", help="JSON file to accumulate train/generate timings in")
    parser.add_argument("-i", "--interactive", action="store_true", help="prompt for seed texts in a loop")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


class CLI:
    """Holds one trained Generator and renders its output with Rich."""
    def __init__(self, cfg: Config, console: Optional[Console] = None, metrics_path: Optional[str] = None):
        if cfg.get("length") < 0:
            raise ValueError(f"length must be >= 0, got {cfg.get('length')}")
        self.cfg = cfg
        self.console = console or Console()
        self.metrics = Metrics(metrics_path)
        self.gen = Generator(cfg.get("window_length"), seed=cfg.get("seed"))
        self.corpus = ""

    def train_file(self, path: str) -> None:
        text = read_corpus(path)
        self.corpus = text
        with Log.time_block("train") as t:
            self.gen.train(text)
        self.metrics.record("train_time", t.duration)

    def default_start(self) -> str:
        """Seed text used when none is configured: the corpus opening window."""
        return self.corpus[:self.gen.window_length]

    def generate(self, initial_text: str) -> str:
        with Log.time_block("generate") as t:
            out = self.gen.generate(initial_text, self.cfg.get("length"))
        self.metrics.record("generate_time", t.duration)
        return out

    # DISPLAY -------------------------------------------------------------------------------
    def show_text(self, text: str) -> None:
        # markup off: corpus text may contain [brackets]
        self.console.print(text, markup=False, highlight=False)

    def show_table(self) -> None:
        """Render each window with its ordered (char, count, p, cp) entries."""
        table = Table(title="Windows", box=box.SIMPLE, show_edge=False)
        table.add_column("Window", style="bold")
        table.add_column("Next chars (char count p cp)", style="cyan")

        for i, (window, entries) in enumerate(self.gen.table.items()):
            if i >= TABLE_ROWS:
                table.add_row("...", f"{len(self.gen.table) - TABLE_ROWS} more")
                break
            cells = " ".join(
                f"({e.char!r} {e.count} {e.p:.3f} {e.cp:.3f})" for e in entries
            )
            table.add_row(Text(repr(window)), Text(cells))
        self.console.print(table)

    def show_stats(self) -> None:
        t = Table(title="Model", box=box.MINIMAL)
        t.add_column("Metric", style="cyan")
        t.add_column("Value", style="white")
        for k, v in self.gen.stats().items():
            t.add_row(k, str(v))
        for k, v in self.metrics.summary().items():
            t.add_row(f"{k} (avg)", f"{v['avg'] * 1000:.2f} ms")
        self.console.print(t)

    # INTERACTIVE ---------------------------------------------------------------------------
    def run_interactive(self) -> None:
        """
        Prompt for seed texts until /quit or EOF.
        Commands: /table /stats /quit
        """
        self.console.rule("[bold magenta]Markov Text Generator[/bold magenta]")
        self.console.print("Type a seed text to extend it. Commands: /table /stats /quit\n")
        while True:
            try:
                line = Prompt.ask("[green]Seed[/green]", default="", console=self.console)
            except (EOFError, KeyboardInterrupt):
                break

            if line in ("/q", "/quit", "/exit"):
                break
            if line == "/table":
                self.show_table()
                continue
            if line == "/stats":
                self.show_stats()
                continue

            self.console.print(Panel(Text(self.generate(line)), border_style="cyan"))
        self.console.rule("[red]Exiting[/red]")


def _merge_args(cfg: Config, args: argparse.Namespace) -> None:
    """Flags given on the command line win over config file values."""
    for key in ("window_length", "seed", "length", "initial_text"):
        val = getattr(args, key)
        if val is not None:
            cfg.data[key] = val
    if args.show_table:
        cfg.data["show_table"] = True


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)-7s %(name)s | %(message)s",
    )
    console = console or Console()

    try:
        cfg = Config(args.config)
        _merge_args(cfg, args)
        cli = CLI(cfg, console=console, metrics_path=args.metrics)
        cli.train_file(args.corpus)
    except (MarkovTextgenError, ValueError) as e:
        logger.error("setup failed: %s", e)
        console.print(f"[red]error:[/red] {escape(str(e))}", highlight=False)
        return 1

    if args.interactive:
        cli.run_interactive()
    else:
        try:
            cli.show_text(cli.generate(cfg.get("initial_text") or cli.default_start()))
        except ValueError as e:
            console.print(f"[red]error:[/red] {escape(str(e))}", highlight=False)
            return 1

    if cfg.get("show_table"):
        cli.show_table()
    if args.stats:
        cli.show_stats()
    cli.metrics.save()
    return 0
