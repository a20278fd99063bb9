"""
Example: Train a BPE tokenizer on a text file and use it for encoding/decoding text.
"""
import logging
from bytepair.tokenizer import BPETokenizer

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger("bytepair.examples")

    # 1. Train a BPE tokenizer on a text file
    with open("example_corpus.txt", "r", encoding="utf-8") as f:  # Provide your own file
        corpus = f.read()
    tokenizer = BPETokenizer(max_vocab_size=1000)
    result = tokenizer.train(corpus, stop_early=True, show_progress=True)
    logger.info(f"Merges: {result.merge_count}, vocab size: {result.vocab_size}")
    logger.info(f"First 10 merges: {[(pair, tokenizer.vocab[new_id].decode('utf-8', 'replace')) for pair, new_id in tokenizer.merges[:10]]}")

    # 2. Register special tokens after training
    tokenizer.register_special_token("<|endoftext|>")

    # 3. Encode and decode text
    text = "hello world<|endoftext|>"
    ids = tokenizer.encode(text)
    print("Token IDs:", ids)
    print("Decoded:", tokenizer.decode(ids))
