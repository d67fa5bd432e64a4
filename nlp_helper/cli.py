# Command-line entry point for the NLP helpers.
# usage: nlp-helper <command> (--text "..." | --input FILE) [options]
#        nlp-helper analyze --input "file|dir" --outdir "data/outputs"

import argparse
import json
import logging
import sys
from pathlib import Path

import pandas as pd

from .nlp import (
    analyze_sentiment,
    get_language,
    get_people_names,
    get_search_terms,
    get_sentences,
    get_sentiment_classifier,
    predict_sentiment,
)
from .shared.errors import NLPHelperError
from .shared.io_utils import hash_stem, read_text
from .translation import get_translator

logger = logging.getLogger("nlp_helper")

SUMMARY_COLUMNS = ["file", "language", "sentiment", "sentence_count", "people", "char_count"]


def _input_text(args) -> str:
    if args.text is not None:
        return args.text
    if args.input is not None:
        return read_text(Path(args.input))
    return sys.stdin.read()


def _emit(result):
    print(json.dumps(result, ensure_ascii=False, indent=2))


def analyze_file(txt_path: Path, outdir: Path):
    """
    Summarize one .txt file: language, sentiment score, sentences and people.
    Writes `<hash_stem>_summary.csv` into `outdir` and returns the row.
    """
    text = read_text(txt_path)
    people = get_people_names(text)
    row = {
        "file": str(txt_path),
        "language": get_language(text),
        "sentiment": analyze_sentiment(text),
        "sentence_count": len(get_sentences(text)),
        "people": "; ".join(dict.fromkeys(people)),  # unique, first-seen order
        "char_count": len(text),
    }
    outdir.mkdir(parents=True, exist_ok=True)
    tag = hash_stem(txt_path)
    pd.DataFrame([row], columns=SUMMARY_COLUMNS).to_csv(outdir / f"{tag}_summary.csv", index=False)
    logger.info("Analyzed %s -> %s_summary.csv", txt_path.name, tag)
    return row


def cmd_analyze(args):
    ip = Path(args.input)
    outdir = Path(args.outdir)

    # Collect paths to process
    if ip.is_dir():
        paths = sorted(ip.rglob("*.txt"))
        if not paths:
            raise SystemExit(f"No .txt files found under: {ip}")
    else:
        if ip.suffix.lower() != ".txt":
            raise SystemExit(f"TXT-only input. Offending file: {ip.name}")
        paths = [ip]

    rows = [analyze_file(p, outdir) for p in paths]
    df = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    df.to_csv(outdir / "summary.csv", index=False)
    logger.info("Wrote %s (%d files)", outdir / "summary.csv", len(df))


def cmd_language(args):
    _emit({"language": get_language(_input_text(args))})


def cmd_names(args):
    _emit(get_people_names(_input_text(args)))


def cmd_terms(args):
    _emit(get_search_terms(_input_text(args), language=args.language))


def cmd_sentiment(args):
    _emit({"sentiment": analyze_sentiment(_input_text(args))})


def cmd_classify(args):
    clf = get_sentiment_classifier(args.model)
    _emit({"label": predict_sentiment(_input_text(args), clf)})


def cmd_sentences(args):
    _emit(get_sentences(_input_text(args), language=args.language))


def cmd_translate(args):
    translator = get_translator(args.model_dir)
    text = _input_text(args)
    if args.by_sentence:
        _emit(translator.translate_sentences(text))
    else:
        _emit({"translation": translator.translate(text)})


def build_parser():
    ap = argparse.ArgumentParser(prog="nlp-helper", description="Language, names, search terms, sentiment, translation.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    sub = ap.add_subparsers(dest="command", required=True)

    def text_command(name, func, help_):
        p = sub.add_parser(name, help=help_)
        src = p.add_mutually_exclusive_group()
        src.add_argument("--text", help="Text to process (default: read stdin).")
        src.add_argument("--input", help="Text file to process.")
        p.set_defaults(func=func)
        return p

    text_command("language", cmd_language, "Dominant language (ISO 639-1).")
    text_command("names", cmd_names, "Personal names in the text.")
    p = text_command("terms", cmd_terms, "Lemma-based search terms.")
    p.add_argument("--language", default=None, help="ISO code selecting the spaCy pipeline.")
    text_command("sentiment", cmd_sentiment, "Sentiment score in [-1, 1].")
    p = text_command("classify", cmd_classify, "Sentiment label from a classifier model.")
    p.add_argument("--model", default=None, help="HuggingFace model id (default: configured model).")
    p = text_command("sentences", cmd_sentences, "Split into sentences.")
    p.add_argument("--language", default=None, help="ISO code selecting the spaCy pipeline.")
    p = text_command("translate", cmd_translate, "Spanish -> English translation.")
    p.add_argument("--model-dir", default=None, help="Directory with vocabularies and model weights.")
    p.add_argument("--by-sentence", action="store_true", help="Translate sentence by sentence.")

    p = sub.add_parser("analyze", help="Summarize .txt files into CSV.")
    p.add_argument("--input", required=True, help=".txt file or directory.")
    p.add_argument("--outdir", default="data/outputs", help="Output directory for CSV files.")
    p.set_defaults(func=cmd_analyze)
    return ap


def main(argv=None):
    """CLI entrypoint: parse arguments and run the selected command."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    try:
        args.func(args)
    except NLPHelperError as e:
        raise SystemExit(f"ERROR: {e}") from e


if __name__ == "__main__":
    main()
