"""
Legacy training script. Use the bytepair package or CLI for BPE training.
Example usage:
    python -m bytepair.cli --data data.txt --vocab-size 1000 --special-tokens <|endoftext|> --verbose
"""
import sys

from bytepair.cli import main

if __name__ == "__main__":
    sys.exit(main())
