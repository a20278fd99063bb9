import time
import logging
from bytepair.tokenizer import BPETokenizer

def test_tokenizer_encode_speed():
    tokenizer = BPETokenizer(300)
    tokenizer.train("hello world " * 50)
    text = "hello world " * 2000  # Large input
    start = time.time()
    ids = tokenizer.encode(text)
    elapsed = time.time() - start
    logger = logging.getLogger("bytepair.tests.test_tokenizer_perf")
    logger.info(f"Encoding 2000x 'hello world' into {len(ids)} tokens took {elapsed:.4f} seconds.")
    assert len(ids) < len(text)
    assert elapsed < 5

def test_tokenizer_decode_speed():
    tokenizer = BPETokenizer(300)
    text = "hello world " * 10000
    ids = tokenizer.encode(text)
    start = time.time()
    decoded = tokenizer.decode(ids)
    elapsed = time.time() - start
    logger = logging.getLogger("bytepair.tests.test_tokenizer_perf")
    logger.info(f"Decoding 10000x 'hello world' took {elapsed:.4f} seconds.")
    assert decoded == text
    assert elapsed < 2

def test_tokenizer_encode_speed_with_absent_special_token():
    tokenizer = BPETokenizer(300)
    tokenizer.register_special_token("<|endoftext|>")
    tokenizer.register_special_token("<|pad|>")  # never occurs in the text
    text = "hello world<|endoftext|>" * 20000
    start = time.time()
    ids = tokenizer.encode(text)
    elapsed = time.time() - start
    logger = logging.getLogger("bytepair.tests.test_tokenizer_perf")
    logger.info(f"Encoding 20000 documents with two special tokens took {elapsed:.4f} seconds.")
    assert len(ids) == 20000 * 12
    assert ids.count(256) == 20000
    assert elapsed < 2
