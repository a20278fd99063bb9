# bytepair/cli.py
"""
Command-line interface for the bytepair tokenizer library.
"""
import argparse
import time
import os
import sys
import psutil
import logging
from .tokenizer import BPETokenizer, DEFAULT_MAX_VOCAB_SIZE
from .exceptions import VocabSizeError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Train a byte-level BPE tokenizer with bytepair and encode text with it.")
    parser.add_argument("--data", type=str, required=True, help="Path to training text file.")
    parser.add_argument("--vocab-size", type=int, default=DEFAULT_MAX_VOCAB_SIZE, help="Maximum vocabulary size.")
    parser.add_argument("--special-tokens", type=str, nargs="*", default=["<|endoftext|>"], help="Special tokens registered after training.")
    parser.add_argument("--stop-early", action="store_true", help="Stop when the best pair occurs only once.")
    parser.add_argument("--verbose", action="store_true", help="Log every merge.")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar while training.")
    parser.add_argument("--text", type=str, action="append", help="Text to encode; may be repeated. Prompts on stdin when omitted.")
    return parser


def prompt_lines():
    while True:
        try:
            line = input("\nEnter text to encode (or 'q' to quit): ")
        except EOFError:
            return
        if line == "q":
            return
        yield line


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger("bytepair.cli")

    try:
        with open(args.data, "rb") as f:
            corpus = f.read()
    except OSError as e:
        logger.error(f"Error opening {args.data}: {e}")
        return 1
    logger.info(f"Corpus size: {len(corpus)} bytes")
    if not corpus:
        logger.error(f"Error: {args.data} is empty")
        return 1

    try:
        tokenizer = BPETokenizer(args.vocab_size)
    except VocabSizeError as e:
        logger.error(f"Error: {e}")
        return 1

    logger.info(f"Training BPE tokenizer on {args.data}...")
    start_time = time.time()
    tokenizer.train(corpus, stop_early=args.stop_early, verbose=args.verbose, show_progress=args.progress)
    elapsed = time.time() - start_time
    for token in args.special_tokens:
        try:
            tokenizer.register_special_token(token)
        except ValueError as e:
            logger.error(f"Error: {e}")
            return 1

    # Resource usage
    process = psutil.Process(os.getpid())
    mem_mb = process.memory_info().rss / (1024 ** 2)
    logger.info(f"Training time: {elapsed:.2f} seconds")
    logger.info(f"Peak memory usage: {mem_mb:.2f} MB")

    # Longest token in vocab
    longest_token = max(tokenizer.vocab.values(), key=len)
    logger.info(f"Longest token in vocab (len={len(longest_token)}): {repr(longest_token)}")

    for text in args.text if args.text is not None else prompt_lines():
        encoded = tokenizer.encode(text)
        print("Encoded:", " ".join(str(i) for i in encoded))
        print("Decoded:", tokenizer.decode(encoded))
    return 0


if __name__ == "__main__":
    sys.exit(main())
